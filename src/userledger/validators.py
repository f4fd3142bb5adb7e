"""
Field validators for user registration.

Every validator takes one raw string and returns a ``ValidationResult``.
Checks run in a fixed order and stop at the first failure, so the reason
returned always names the earliest rule the value breaks. Validators never
raise and never touch storage.
"""

import string
from typing import Callable, Dict, Optional

from .models import ValidationResult


MIN_AGE = 1
MAX_AGE = 150
PHONE_LENGTH = 12

# Ages that do not fit a signed 32-bit integer are reported as a format error.
_MAX_PARSEABLE_AGE = 2 ** 31 - 1

_CYRILLIC_LETTERS = frozenset(
    "абвгдежзийклмнопрстуфхцчшщъыьэюя"
    "АБВГДЕЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"
    "ёЁ"
)
_LATIN_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)

NAME_CHARS = _CYRILLIC_LETTERS | _LATIN_LETTERS | frozenset(" -")
EMAIL_LOCAL_CHARS = _LATIN_LETTERS | _DIGITS | frozenset("-.")
EMAIL_DOMAIN_CHARS = _LATIN_LETTERS | _DIGITS | frozenset("-")


class Messages:
    """Rejection reasons, one per rule."""

    NAME_EMPTY = "Full name cannot be empty"
    NAME_CHARS = "Full name may contain only letters, spaces and hyphens"

    AGE_EMPTY = "Age cannot be empty"
    AGE_DIGITS = "Age must contain only digits"
    AGE_FORMAT = "Invalid age format"
    AGE_RANGE = f"Age must be between {MIN_AGE} and {MAX_AGE}"

    PHONE_EMPTY = "Phone cannot be empty"
    PHONE_LENGTH = f"Phone must contain {PHONE_LENGTH} characters (including +7)"
    PHONE_PLUS = "Phone must start with +"
    PHONE_COUNTRY = "Phone must start with +7"
    PHONE_OPERATOR = "Third character of the phone must be 9"
    PHONE_DIGITS = "Phone must contain only digits after +7"

    EMAIL_EMPTY = "Email cannot be empty"
    EMAIL_AT_COUNT = "Email must contain exactly one @"
    EMAIL_AT_POSITION = "@ cannot be the first or last character of the email"
    EMAIL_NO_DOT = "Email must contain a dot after @"
    EMAIL_EMPTY_DOMAIN_NAME = "Email must have at least one character between @ and the dot"
    EMAIL_EMPTY_TLD = "Email must have a domain after the dot"
    EMAIL_LOCAL_CHARS = "Email name part may contain only letters, digits, hyphens and dots"
    EMAIL_DOMAIN_CHARS = "Email domain may contain only letters, digits and hyphens"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_full_name(full_name: Optional[str]) -> ValidationResult:
    """Accept Cyrillic and Latin letters, spaces and hyphens."""
    if _is_blank(full_name):
        return ValidationResult.reject(Messages.NAME_EMPTY)

    if any(c not in NAME_CHARS for c in full_name):
        return ValidationResult.reject(Messages.NAME_CHARS)

    return ValidationResult.ok()


def validate_age(age: Optional[str]) -> ValidationResult:
    """Accept a whole number of years from 1 to 150, written with ASCII digits."""
    if _is_blank(age):
        return ValidationResult.reject(Messages.AGE_EMPTY)

    if any(c not in _DIGITS for c in age):
        return ValidationResult.reject(Messages.AGE_DIGITS)

    age_number = int(age)
    if age_number > _MAX_PARSEABLE_AGE:
        return ValidationResult.reject(Messages.AGE_FORMAT)

    if age_number < MIN_AGE or age_number > MAX_AGE:
        return ValidationResult.reject(Messages.AGE_RANGE)

    return ValidationResult.ok()


def normalize_phone(phone: Optional[str]) -> str:
    """Strip spaces from a phone number."""
    return (phone or "").replace(" ", "")


def validate_phone(phone: Optional[str]) -> ValidationResult:
    """Accept a Russian mobile number in the form ``+79XXXXXXXXX``.

    Spaces anywhere in the value are ignored.
    """
    if _is_blank(phone):
        return ValidationResult.reject(Messages.PHONE_EMPTY)

    clean_phone = normalize_phone(phone)

    if len(clean_phone) != PHONE_LENGTH:
        return ValidationResult.reject(Messages.PHONE_LENGTH)
    if clean_phone[0] != "+":
        return ValidationResult.reject(Messages.PHONE_PLUS)
    if clean_phone[1] != "7":
        return ValidationResult.reject(Messages.PHONE_COUNTRY)
    if clean_phone[2] != "9":
        return ValidationResult.reject(Messages.PHONE_OPERATOR)

    if any(c not in _DIGITS for c in clean_phone[3:]):
        return ValidationResult.reject(Messages.PHONE_DIGITS)

    return ValidationResult.ok()


def validate_email(email: Optional[str]) -> ValidationResult:
    """Accept ``local@domain.tld`` addresses.

    Only the first dot after ``@`` is checked for placement; later dots in
    the domain are allowed, so ``a@b.c.com`` passes.
    """
    if _is_blank(email):
        return ValidationResult.reject(Messages.EMAIL_EMPTY)

    if email.count("@") != 1:
        return ValidationResult.reject(Messages.EMAIL_AT_COUNT)

    at_position = email.index("@")
    if at_position == 0 or at_position == len(email) - 1:
        return ValidationResult.reject(Messages.EMAIL_AT_POSITION)

    dot_position = email.find(".", at_position + 1)
    if dot_position == -1:
        return ValidationResult.reject(Messages.EMAIL_NO_DOT)
    if dot_position == at_position + 1:
        return ValidationResult.reject(Messages.EMAIL_EMPTY_DOMAIN_NAME)
    if dot_position == len(email) - 1:
        return ValidationResult.reject(Messages.EMAIL_EMPTY_TLD)

    local_part = email[:at_position]
    if not local_part or any(c not in EMAIL_LOCAL_CHARS for c in local_part):
        return ValidationResult.reject(Messages.EMAIL_LOCAL_CHARS)

    domain_part = email[at_position + 1:]
    if not domain_part or any(c != "." and c not in EMAIL_DOMAIN_CHARS for c in domain_part):
        return ValidationResult.reject(Messages.EMAIL_DOMAIN_CHARS)

    return ValidationResult.ok()


FIELD_VALIDATORS: Dict[str, Callable[[Optional[str]], ValidationResult]] = {
    "full_name": validate_full_name,
    "age": validate_age,
    "phone": validate_phone,
    "email": validate_email,
}


def validate_user(full_name: Optional[str], age: Optional[str],
                  phone: Optional[str], email: Optional[str]) -> Dict[str, ValidationResult]:
    """Run every field validator and return the results keyed by field name."""
    values = {
        "full_name": full_name,
        "age": age,
        "phone": phone,
        "email": email,
    }
    return {name: FIELD_VALIDATORS[name](value) for name, value in values.items()}
