from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..core.constants import MAX_AMOUNT_DIGITS
from ..core.enums import ClassType
from ..core.exceptions import ValidationError


def parse_decimal(
    value: Any,
    field_name: str,
    *,
    default: Optional[Decimal] = None,
    max_digits: Optional[int] = MAX_AMOUNT_DIGITS,
) -> Decimal:
    """Turn a raw form value into a finite Decimal.

    ``None`` and blank strings fall back to ``default`` (an error when no
    default is given). Floats go through ``str`` so 0.1 stays 0.1.
    Magnitudes of 10**max_digits and above are rejected; pass ``None`` to
    accept any finite value.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        if default is None:
            raise ValidationError(f"{field_name} is required", field=field_name)
        return default

    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number", field=field_name)

    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number", field=field_name) from None

    if not number.is_finite():
        raise ValidationError(f"{field_name} must be a number", field=field_name)
    if max_digits is not None and number and number.adjusted() >= max_digits:
        raise ValidationError(f"{field_name} is too large", field=field_name)
    return number


def require_non_negative(value: Decimal, field_name: str) -> Decimal:
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative", field=field_name)
    return value


def require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is invalid", field=field_name)
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is invalid", field=field_name) from None


def parse_class_type(value: Any) -> Optional[ClassType]:
    """Blank means "no class type" (base fee applies)."""
    if value is None or not str(value).strip():
        return None
    try:
        return ClassType(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(c.value for c in ClassType)
        raise ValidationError(f"class_type must be one of: {allowed}", field="class_type") from None
