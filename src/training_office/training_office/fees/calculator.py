"""Fee ledger arithmetic shared by every form that takes money.

Student registration, course registration, quotations, proposals and expenses
all call :func:`compute_ledger` with their own line items, so totals, VAT and
payment status come out the same wherever they are entered.

Pure functions only: no repositories, no logging, no I/O.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, DecimalException, localcontext
from typing import Any, Iterable, Optional

from ..common.validators import parse_decimal, require_non_negative
from ..core.constants import LEDGER_PRECISION, MAX_DISCOUNT_PERCENT, MONEY_PLACES
from ..core.enums import PaymentStatus
from ..core.exceptions import InvalidLineItem, ValidationError
from .model import LedgerSummary, LineItem

__all__ = [
    "clamp_discount_percent",
    "compute_ledger",
    "derive_payment_status",
    "round_money",
]

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def round_money(value: Decimal) -> Decimal:
    """Quantize to 2 places, half-up. Never returns a negative zero."""
    rounded = value.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)
    return rounded if rounded else abs(rounded)


def clamp_discount_percent(value: Any, limit: Decimal = MAX_DISCOUNT_PERCENT) -> Decimal:
    """Clamp a discount percentage into ``[0, limit]``. Blank means 0."""
    percent = parse_decimal(value, "discount_percent", default=_ZERO, max_digits=None)
    if percent < 0:
        return _ZERO
    if percent > limit:
        return Decimal(limit)
    return percent


def derive_payment_status(balance_due: Decimal, amount_paid: Decimal) -> PaymentStatus:
    """
    - 'paid'    if balance_due <= 0
    - 'partial' if balance_due > 0 and amount_paid > 0
    - 'pending' otherwise

    An empty ledger (nothing owed, nothing paid) stays 'pending'.
    """
    if balance_due == 0 and amount_paid == 0:
        return PaymentStatus.PENDING
    if balance_due <= 0:
        return PaymentStatus.PAID
    if amount_paid > 0:
        return PaymentStatus.PARTIAL
    return PaymentStatus.PENDING


def _line_amount(raw: Any, *, index: int, field: str) -> Decimal:
    try:
        value = parse_decimal(raw, field)
    except ValidationError as e:
        raise InvalidLineItem(f"Line {index + 1}: {e}", index=index, field=field) from None
    if value < 0:
        raise InvalidLineItem(f"Line {index + 1}: {field} must not be negative", index=index, field=field)
    return value


def _line_discount(raw: Any, *, index: int, limit: Decimal) -> Decimal:
    try:
        return clamp_discount_percent(raw, limit)
    except ValidationError:
        raise InvalidLineItem(
            f"Line {index + 1}: discount_percent must be a number", index=index, field="discount_percent"
        ) from None


def compute_ledger(
    line_items: Iterable[LineItem],
    vat_rate: Any,
    amount_paid: Optional[Any] = None,
    *,
    max_discount: Decimal = MAX_DISCOUNT_PERCENT,
) -> LedgerSummary:
    """Compute subtotal, discount, VAT, grand total, balance and status.

    Order is fixed: per-line net and discount, sums, net after discount, VAT
    on the discounted net, grand total, balance, status. Everything runs at
    full precision (status included); only the returned fields are rounded.

    Raises:
        InvalidLineItem: a price or quantity is negative, too large or not a number.
        ValidationError: ``vat_rate`` or ``amount_paid`` is negative, too large or
            not a number, or the totals cannot be represented.
    """
    rate = require_non_negative(parse_decimal(vat_rate, "vat_rate"), "vat_rate")
    paid = require_non_negative(parse_decimal(amount_paid, "amount_paid", default=_ZERO), "amount_paid")

    try:
        with localcontext() as ctx:
            ctx.prec = LEDGER_PRECISION

            subtotal = _ZERO
            discount_amount = _ZERO
            for index, item in enumerate(line_items):
                unit_price = _line_amount(item.unit_price, index=index, field="unit_price")
                quantity = _line_amount(item.quantity, index=index, field="quantity")
                percent = _line_discount(item.discount_percent, index=index, limit=max_discount)

                line_net = unit_price * quantity
                subtotal += line_net
                discount_amount += line_net * percent / _HUNDRED

            net_after_discount = subtotal - discount_amount
            vat = net_after_discount * rate
            grand_total = net_after_discount + vat
            balance_due = grand_total - paid

            return LedgerSummary(
                subtotal=round_money(subtotal),
                discount_amount=round_money(discount_amount),
                net_after_discount=round_money(net_after_discount),
                vat=round_money(vat),
                grand_total=round_money(grand_total),
                amount_paid=round_money(paid),
                balance_due=round_money(balance_due),
                payment_status=derive_payment_status(balance_due, paid),
            )
    except DecimalException:
        raise ValidationError("Totals are too large to compute", field="items") from None
