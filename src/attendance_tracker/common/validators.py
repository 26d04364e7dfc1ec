from __future__ import annotations

import math
import re
from fractions import Fraction

from ..core.exceptions import InvalidInputError, ValidationError

_INT_RE = re.compile(r"^[+-]?\d+$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_text(value) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def require_int(value, field_name: str) -> int:
    """Accept ints and integer strings; reject bools, floats and anything else."""
    if isinstance(value, bool):
        raise InvalidInputError(f"{field_name} must be a whole number")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_RE.match(value.strip()):
        return int(value.strip())
    raise InvalidInputError(f"{field_name} must be a whole number")


def require_percent(value, field_name: str) -> Fraction:
    """Parse a 0-100 percentage into an exact Fraction of its decimal text (80.2 -> 401/5)."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise InvalidInputError(f"{field_name} must be a number")

    text = str(value).strip()
    try:
        number = float(text)
    except ValueError:
        raise InvalidInputError(f"{field_name} must be a number") from None

    if not math.isfinite(number) or number < 0 or number > 100:
        raise InvalidInputError(f"{field_name} must be between 0 and 100")
    try:
        return Fraction(text)
    except ValueError:
        raise InvalidInputError(f"{field_name} must be a number") from None


def require_max_length(value: str | None, field_name: str, max_len: int) -> str | None:
    if value is not None and len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value
