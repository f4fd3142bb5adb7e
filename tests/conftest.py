"""Fixtures for userledger tests."""

import pytest
from userledger.store import UserStore
from userledger.services import RegistrationService


@pytest.fixture
def store_path(tmp_path):
    """Path of a user store file that does not exist yet."""
    return tmp_path / "users.txt"


@pytest.fixture
def store(store_path):
    """Create a UserStore backed by a temporary file."""
    return UserStore(store_path)


@pytest.fixture
def registration_service(store):
    """Create a RegistrationService over the temporary store."""
    return RegistrationService(store)


@pytest.fixture
def valid_user():
    """Field values that pass every validator."""
    return {
        "full_name": "Иван Петров-Водкин",
        "age": "34",
        "phone": "+79991234567",
        "email": "ivan.petrov@mail.ru",
    }
