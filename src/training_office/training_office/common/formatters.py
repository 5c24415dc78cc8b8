from __future__ import annotations

from decimal import Decimal

from ..core.constants import DEFAULT_CURRENCY, MONEY_PLACES


def format_money(amount: Decimal, currency: str = DEFAULT_CURRENCY) -> str:
    """Render ``Decimal("1234.5")`` as ``"AED 1,234.50"``."""
    value = Decimal(amount).quantize(MONEY_PLACES)
    sign = "-" if value < 0 else ""
    return f"{sign}{currency} {abs(value):,.2f}"
