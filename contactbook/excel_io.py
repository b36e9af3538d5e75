"""Экспорт справочника в формате Excel."""
import io
import logging
from typing import Iterable

import pandas as pd

from .config import Settings
from .models import Contact

logger = logging.getLogger(__name__)

COLUMNS = [
    'Contact ID',
    'First Name',
    'Last Name',
    'Phone',
    'Address',
]


def export_to_excel(contacts: Iterable[Contact]) -> bytes:
    """Возвращает байты Excel-файла со всеми контактами.

    Все ячейки пишутся строками, поэтому ведущие нули в телефоне и ID сохраняются.
    """
    data = []
    for contact in contacts:
        data.append({
            'Contact ID': contact.contact_id,
            'First Name': contact.first_name,
            'Last Name': contact.last_name,
            'Phone': contact.phone,
            'Address': contact.address,
        })
    df = pd.DataFrame(data, columns=COLUMNS, dtype=str)
    buffer = io.BytesIO()
    df.to_excel(buffer, index=False, sheet_name=Settings.EXPORT_SHEET, engine='openpyxl')
    buffer.seek(0)
    logger.info('Экспортировано контактов в Excel: %d', len(df))
    return buffer.read()
