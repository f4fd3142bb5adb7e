"""
Data models for userledger.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, NamedTuple

from .exceptions import ValidationError, DuplicateUserError


FIELD_SEPARATOR = "|"


class ValidationResult(NamedTuple):
    """Outcome of a single field check. Unpacks as ``(accepted, reason)``."""

    accepted: bool
    reason: str = ""

    @classmethod
    def ok(cls) -> 'ValidationResult':
        return cls(True, "")

    @classmethod
    def reject(cls, reason: str) -> 'ValidationResult':
        return cls(False, reason)


class UserRecord(NamedTuple):
    """A stored user, in storage field order."""

    full_name: str
    phone: str
    email: str
    age: str

    def to_line(self) -> str:
        """Serialize as one pipe-delimited store line (without newline)."""
        return FIELD_SEPARATOR.join(self)

    @classmethod
    def from_line(cls, line: str) -> Optional['UserRecord']:
        """Parse a store line. Returns None when it has fewer than four fields."""
        parts = line.split(FIELD_SEPARATOR)
        if len(parts) < 4:
            return None
        return cls(*parts[:4])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "full_name": self.full_name,
            "phone": self.phone,
            "email": self.email,
            "age": self.age,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UserRecord':
        """Create instance from dictionary."""
        return cls(
            full_name=data["full_name"],
            phone=data["phone"],
            email=data["email"],
            age=str(data["age"]),
        )


@dataclass
class RegistrationResult:
    """Result of a registration attempt."""

    success: bool
    record: Optional[UserRecord] = None
    errors: Dict[str, str] = field(default_factory=dict)
    duplicate: bool = False

    @property
    def rejected_fields(self) -> List[str]:
        return list(self.errors)

    def ensure_valid(self) -> UserRecord:
        """Return the saved record, or raise the error describing why it was not saved."""
        if self.errors:
            raise ValidationError(self.errors)
        if self.duplicate:
            raise DuplicateUserError("User with the same full name, phone or email already exists")
        return self.record

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "success": self.success,
            "record": self.record.to_dict() if self.record else None,
            "errors": dict(self.errors),
            "duplicate": self.duplicate,
        }
