"""Identifier derivation and validation helpers."""

import re
from typing import Final

MAX_COMPANY_ID_LENGTH: Final[int] = 100

_WHITESPACE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s+")


def company_id_from_name(name: str) -> str:
    """Derive a company's primary key from its display name.

    Lower-cases the name and removes every run of whitespace, e.g.
    ``"Slack Technologies"`` -> ``"slacktechnologies"``.

    Raises:
        ValueError: If nothing is left once whitespace is removed.
    """
    company_id = _WHITESPACE_PATTERN.sub("", name.lower())
    if not company_id:
        raise ValueError("Company name must contain at least one non-whitespace character")
    if len(company_id) > MAX_COMPANY_ID_LENGTH:
        raise ValueError(f"Company name is too long (max {MAX_COMPANY_ID_LENGTH} characters)")
    return company_id
