import re
from typing import Optional

_IDENTIFIER_RE = re.compile(r'^[A-Za-z_][A-Za-z0-9_$]*$')


def validate_sql_identifier(identifier: str) -> str:
    """Return ``identifier`` if it matches a basic SQL identifier pattern."""
    if not isinstance(identifier, str) or not _IDENTIFIER_RE.match(identifier):
        raise ValueError(f"Invalid SQL identifier '{identifier}'")
    return identifier


def validate_optional_identifier(identifier: Optional[str]) -> Optional[str]:
    """Like :func:`validate_sql_identifier` but lets ``None`` through."""
    if identifier is None:
        return None
    return validate_sql_identifier(identifier)


__all__ = [
    "validate_sql_identifier",
    "validate_optional_identifier",
]
