from __future__ import annotations

import math
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required.")
    return str(value).strip()


def require_all(message: str, *values: Any) -> None:
    """Fail with ``message`` unless every value is truthy (0 and false count as missing)."""
    if any(not value for value in values):
        raise ValidationError(message)


def require_coordinate(value: Any, field_name: str) -> float:
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number.")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number.") from None
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a number.")
    return number
