"""Исключения справочника контактов."""


class ContactBookError(Exception):
    """Базовое исключение справочника."""
    pass


class ValidationError(ContactBookError, ValueError):
    """Значение поля не проходит ограничения по длине или формату."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class DuplicateIdError(ContactBookError):
    """Контакт с таким ID уже есть в справочнике."""

    def __init__(self, contact_id: str):
        self.contact_id = contact_id
        super().__init__(f"A contact with this ID already exists: {contact_id}")


class NotFoundError(ContactBookError, LookupError):
    """Контакт с таким ID не найден."""

    def __init__(self, contact_id: str, action: str = 'find'):
        self.contact_id = contact_id
        self.action = action
        super().__init__(f"Cannot {action}. Contact ID not found: {contact_id}")
