"""userledger - User registration validation and storage."""

__version__ = "0.1.0"

from .models import UserRecord, ValidationResult, RegistrationResult
from .validators import (
    validate_full_name,
    validate_age,
    validate_phone,
    validate_email,
    validate_user,
)
from .store import UserStore
from .services import RegistrationService
from .exceptions import UserLedgerError

__all__ = [
    "UserRecord",
    "ValidationResult",
    "RegistrationResult",
    "validate_full_name",
    "validate_age",
    "validate_phone",
    "validate_email",
    "validate_user",
    "UserStore",
    "RegistrationService",
    "UserLedgerError",
]
