"""Pure validation rules shared by the services.

Each rule either returns the normalised value or raises ValidationError.
None of them touch storage.
"""

from __future__ import annotations

import re

from tasktracker.domain.exceptions import ValidationError

# local@domain.tld, no whitespace, exactly one "@"
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255
MAX_TITLE_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 1000


def require_text(value: object, label: str, max_length: int) -> str:
    """Return *value* stripped, failing if it is missing, blank or too long."""
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} is required")
    value = value.strip()
    if len(value) > max_length:
        raise ValidationError(f"{label} must not exceed {max_length} characters")
    return value


def optional_text(value: object, label: str, max_length: int) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{label} must be a string")
    if len(value) > max_length:
        raise ValidationError(f"{label} must not exceed {max_length} characters")
    return value


def validate_email(value: object) -> str:
    email = require_text(value, "Email", MAX_EMAIL_LENGTH)
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Invalid email format", details={"email": email})
    return email


def validate_name(value: object) -> str:
    return require_text(value, "Name", MAX_NAME_LENGTH)


def validate_title(value: object) -> str:
    return require_text(value, "Task title", MAX_TITLE_LENGTH)


def validate_description(value: object) -> str | None:
    return optional_text(value, "Description", MAX_DESCRIPTION_LENGTH)


def require_id(value: object, label: str) -> int:
    """Return *value* as an entity id, failing if it is absent or not an int."""
    if value is None:
        raise ValidationError(f"{label} is required")
    # bool is an int subclass; True must not become id 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be an integer")
    return value
