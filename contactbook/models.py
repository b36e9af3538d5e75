"""Модель контакта справочника."""
import logging
from dataclasses import asdict, dataclass
from typing import Dict

from .exceptions import ValidationError
from .validation import VALIDATORS

logger = logging.getLogger(__name__)


@dataclass
class Contact:
    """Контакт в справочнике.

    Каждое присваивание поля (в конструкторе и после него) проходит проверку
    из validation.VALIDATORS; при ошибке старое значение остаётся на месте.
    contact_id задаётся один раз.
    """
    contact_id: str
    first_name: str
    last_name: str
    phone: str
    address: str

    def __setattr__(self, name: str, value) -> None:
        if name == 'contact_id' and 'contact_id' in self.__dict__:
            raise AttributeError('contact_id cannot be changed')
        validator = VALIDATORS.get(name)
        if validator is not None:
            try:
                value = validator(value)
            except ValidationError as exc:
                logger.debug('Отклонено значение поля %s: %s', name, exc)
                raise
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in VALIDATORS:
            raise AttributeError(f'{name} cannot be deleted')
        super().__delattr__(name)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> Dict[str, str]:
        """Словарь полей для отчётов и экспорта."""
        return asdict(self)
