"""Справочник контактов в памяти: добавление, удаление, обновление и поиск по ID."""
import logging
import threading
from typing import Dict, Iterator, List, Optional

from .exceptions import DuplicateIdError, NotFoundError
from .models import Contact

logger = logging.getLogger(__name__)

# порядок применения полей в update_contact
UPDATABLE_FIELDS = ('first_name', 'last_name', 'phone', 'address')


class ContactDirectory:
    """Коллекция контактов с уникальными ID.

    Все операции над словарём идут под одной блокировкой.
    """

    def __init__(self) -> None:
        self._contacts: Dict[str, Contact] = {}
        self._lock = threading.RLock()

    def add_contact(self, contact: Contact) -> None:
        """Добавляет контакт; поля уже проверены при создании Contact."""
        if not isinstance(contact, Contact):
            raise TypeError(f'Ожидался Contact, получен {type(contact).__name__}')
        with self._lock:
            if contact.contact_id in self._contacts:
                logger.warning('Повторный ID при добавлении: %s', contact.contact_id)
                raise DuplicateIdError(contact.contact_id)
            self._contacts[contact.contact_id] = contact
        logger.info('Контакт добавлен: %s', contact.contact_id)

    def delete_contact(self, contact_id: str) -> None:
        with self._lock:
            if contact_id not in self._contacts:
                logger.warning('Удаление несуществующего контакта: %s', contact_id)
                raise NotFoundError(contact_id, action='delete')
            del self._contacts[contact_id]
        logger.info('Контакт удалён: %s', contact_id)

    def update_contact(
        self,
        contact_id: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> Contact:
        """Обновляет переданные поля контакта по одному.

        None означает «не менять». Поля применяются в порядке UPDATABLE_FIELDS;
        если проверка очередного поля не прошла, ValidationError уходит наружу,
        а уже применённые поля не откатываются.
        """
        values = {
            'first_name': first_name,
            'last_name': last_name,
            'phone': phone,
            'address': address,
        }
        with self._lock:
            contact = self._contacts.get(contact_id)
            if contact is None:
                logger.warning('Обновление несуществующего контакта: %s', contact_id)
                raise NotFoundError(contact_id, action='update')
            changed = []
            for name in UPDATABLE_FIELDS:
                if values[name] is not None:
                    setattr(contact, name, values[name])
                    changed.append(name)
        logger.info('Контакт обновлён: %s (%s)', contact_id, ', '.join(changed) or 'без изменений')
        return contact

    def get_contact(self, contact_id: str) -> Optional[Contact]:
        """Возвращает контакт или None, если такого ID нет."""
        with self._lock:
            return self._contacts.get(contact_id)

    def list_contacts(self) -> List[Contact]:
        """Все контакты в порядке добавления."""
        with self._lock:
            return list(self._contacts.values())

    def search(self, term: str) -> List[Contact]:
        """Поиск подстроки без учёта регистра по имени, фамилии, телефону и адресу."""
        contacts = self.list_contacts()
        if not term:
            return contacts
        term = term.lower()
        return [
            c for c in contacts
            if term in c.first_name.lower() or term in c.last_name.lower()
            or term in c.phone or term in c.address.lower()
        ]

    def sorted_by_name(self) -> List[Contact]:
        return sorted(
            self.list_contacts(),
            key=lambda c: (c.last_name.lower(), c.first_name.lower(), c.contact_id),
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._contacts)

    def __contains__(self, contact_id: object) -> bool:
        with self._lock:
            return contact_id in self._contacts

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.list_contacts())
