"""
Registration service for user sign-up.
Validates the submitted fields, checks for duplicates and stores accepted users.
"""

import logging
from typing import List

from ..models import RegistrationResult, UserRecord
from ..store import UserStore
from ..validators import validate_user, normalize_phone

logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for handling user registration."""

    def __init__(self, store: UserStore):
        """
        Initialize registration service.

        Args:
            store: User store that accepted records are appended to
        """
        self.store = store

    def register(self, full_name: str, age: str, phone: str, email: str) -> RegistrationResult:
        """
        Register a user if every field is valid and no matching user is stored.

        Args:
            full_name: Full name as entered
            age: Age as entered
            phone: Phone number, spaces allowed
            email: Email address

        Returns:
            RegistrationResult with the saved record, or the per-field
            rejection reasons, or the duplicate flag
        """
        results = validate_user(full_name, age, phone, email)
        errors = {name: result.reason for name, result in results.items() if not result.accepted}

        if errors:
            logger.info(f"Registration rejected, invalid fields: {', '.join(errors)}")
            return RegistrationResult(success=False, errors=errors)

        full_name = full_name.strip()
        phone = normalize_phone(phone)

        if self.store.exists(full_name, phone, email):
            logger.info(f"Registration rejected, user already exists: {full_name!r}")
            return RegistrationResult(success=False, duplicate=True)

        record = self.store.save(full_name, age, phone, email)
        return RegistrationResult(success=True, record=record)

    def register_or_raise(self, full_name: str, age: str, phone: str, email: str) -> UserRecord:
        """Register a user, raising ValidationError or DuplicateUserError on failure."""
        return self.register(full_name, age, phone, email).ensure_valid()

    def is_registered(self, full_name: str, phone: str, email: str) -> bool:
        """Check whether a user with any of these identifiers is stored."""
        return self.store.exists(full_name, normalize_phone(phone), email)

    def list_users(self) -> List[UserRecord]:
        """Return all stored users."""
        return self.store.list_all()
