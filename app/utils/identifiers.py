"""
Identifier parsing
"""
import re
from typing import Union

from app.core.exceptions import InvalidIdentifierError

_NUMERIC_ID = re.compile(r"^[0-9]+$")

# Largest value a BIGINT column (and an SQL OFFSET) can hold
MAX_ID = 2 ** 63 - 1


def parse_numeric_id(value: Union[str, int], field: str = "id") -> int:
    """
    Coerce a path/form identifier to a positive int.

    Raises InvalidIdentifierError for anything that is not a plain positive
    integer that fits a BIGINT, so callers can reject input before touching
    the database.
    """
    if isinstance(value, bool):
        raise InvalidIdentifierError(field, value)
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and _NUMERIC_ID.match(value.strip()):
        parsed = int(value.strip())
    else:
        raise InvalidIdentifierError(field, value)
    if parsed < 1 or parsed > MAX_ID:
        raise InvalidIdentifierError(field, value)
    return parsed
