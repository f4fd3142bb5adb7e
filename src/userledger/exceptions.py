"""
Exception classes for userledger.
"""

from typing import Dict, Optional


class UserLedgerError(Exception):
    """Base exception for all userledger errors."""
    pass


class StoreError(UserLedgerError):
    """Exception raised when the user store cannot be read or written."""
    pass


class ValidationError(UserLedgerError):
    """Exception raised when one or more registration fields are rejected."""

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = dict(errors)
        if message is None:
            message = "; ".join(f"{field}: {reason}" for field, reason in self.errors.items())
        super().__init__(message)


class DuplicateUserError(UserLedgerError):
    """Exception raised when a user with the same name, phone or email is already stored."""
    pass


class ConfigurationError(UserLedgerError):
    """Exception raised for configuration errors."""
    pass
