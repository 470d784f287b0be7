# Standard library imports
import re
from typing import Optional

# Local application imports
from .exceptions import ValidationError


EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def normalize_email(email: Optional[str]) -> str:
    """
    Trim and lower-case an email address.

    Raises:
        ValidationError: If nothing is left after trimming
    """
    normalized = (email or "").strip().lower()
    if not normalized:
        raise ValidationError("Email is required")
    return normalized


def is_valid_email(email: str) -> bool:
    """True when the value has local-part@domain.tld shape with no whitespace."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def normalize_and_validate_email(email: Optional[str]) -> str:
    """Normalize an email and reject it unless it has a valid shape."""
    normalized = normalize_email(email)
    if not is_valid_email(normalized):
        raise ValidationError("Invalid email format")
    return normalized
