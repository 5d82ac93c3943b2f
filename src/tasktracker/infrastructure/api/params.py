"""Parsing of path and query parameters.

Ids arrive as strings and are turned into ints here, before any service
is called, so a bad id is always a 400 and never reaches the store.
"""

from __future__ import annotations

import re

from tasktracker.domain.exceptions import ValidationError

# Largest value a signed 64-bit INTEGER column can hold.
MAX_ID = 2**63 - 1

_ID_PATTERN = re.compile(r"[0-9]+")


def parse_id(raw: str, label: str) -> int:
    """Parse '42' into 42, raising ValidationError for anything else."""
    value = raw.strip()
    if not _ID_PATTERN.fullmatch(value) or int(value) > MAX_ID:
        raise ValidationError(f"Invalid {label}", details={"value": raw})
    return int(value)


def parse_optional_id(raw: str | None, label: str) -> int | None:
    if raw is None or raw == "":
        return None
    return parse_id(raw, label)
