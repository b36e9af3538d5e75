"""Общие фикстуры тестов справочника."""
import pytest

from contactbook.models import Contact
from contactbook.repository import ContactDirectory


@pytest.fixture
def contact() -> Contact:
    return Contact("201", "James", "Anderson", "1234567890", "789 Sunset Blvd")


@pytest.fixture
def directory() -> ContactDirectory:
    return ContactDirectory()


@pytest.fixture
def filled_directory(directory: ContactDirectory) -> ContactDirectory:
    directory.add_contact(Contact("202", "Emily", "Carter", "9876543210", "456 Maple Street"))
    directory.add_contact(Contact("203", "Sophia", "Johnson", "5554443333", "321 Birch Lane"))
    directory.add_contact(Contact("204", "Liam", "Williams", "7778889999", "789 Cypress Ave"))
    return directory
