"""In-memory справочник контактов с валидацией полей."""
from .exceptions import ContactBookError, DuplicateIdError, NotFoundError, ValidationError
from .models import Contact
from .repository import ContactDirectory

__all__ = [
    'Contact',
    'ContactBookError',
    'ContactDirectory',
    'DuplicateIdError',
    'NotFoundError',
    'ValidationError',
]
