"""Правила проверки полей контакта.

Одна функция на поле: её вызывает и конструктор Contact, и сеттер поля.
Каждая функция возвращает значение в том виде, в котором его нужно хранить.
"""
from .exceptions import ValidationError

MAX_ID_LENGTH = 10
MAX_NAME_LENGTH = 10
PHONE_LENGTH = 10
MAX_ADDRESS_LENGTH = 30
ASCII_DIGITS = frozenset('0123456789')


def _require_text(field: str, value, max_length: int, label: str) -> str:
    # длина считается по исходной строке, до обрезки пробелов
    if not isinstance(value, str) or not value.strip() or len(value) > max_length:
        raise ValidationError(
            field,
            f'Invalid {label}: Must be non-null, non-empty, and no longer than {max_length} characters.',
        )
    return value


def validate_contact_id(value) -> str:
    return _require_text('contact_id', value, MAX_ID_LENGTH, 'contact ID')


def validate_first_name(value) -> str:
    return _require_text('first_name', value, MAX_NAME_LENGTH, 'first name')


def validate_last_name(value) -> str:
    return _require_text('last_name', value, MAX_NAME_LENGTH, 'last name')


def validate_phone(value) -> str:
    """Ровно 10 цифр ASCII ('0'-'9')."""
    if not isinstance(value, str) or len(value) != PHONE_LENGTH or not set(value) <= ASCII_DIGITS:
        raise ValidationError('phone', f'Invalid phone: Must be exactly {PHONE_LENGTH} digits.')
    return value


def validate_address(value) -> str:
    """Хранится обрезанная форма адреса."""
    return _require_text('address', value, MAX_ADDRESS_LENGTH, 'address').strip()


VALIDATORS = {
    'contact_id': validate_contact_id,
    'first_name': validate_first_name,
    'last_name': validate_last_name,
    'phone': validate_phone,
    'address': validate_address,
}
