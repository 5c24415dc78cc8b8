from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from ..core.enums import PaymentStatus


@dataclass(frozen=True)
class LineItem:
    """One priced unit (a course, a service) entered into a form.

    Values are kept as the caller gave them; ``fees.calculator`` normalises
    and validates them on every computation.
    """

    unit_price: Any
    discount_percent: Any = 0
    quantity: Any = 1
    description: Optional[str] = None


@dataclass(frozen=True)
class LedgerSummary:
    """Totals derived from a set of line items plus the amount paid.

    Recomputed from scratch on every change; never persisted as such.
    """

    subtotal: Decimal
    discount_amount: Decimal
    net_after_discount: Decimal
    vat: Decimal
    grand_total: Decimal
    amount_paid: Decimal
    balance_due: Decimal
    payment_status: PaymentStatus

    @classmethod
    def zero(cls) -> "LedgerSummary":
        nil = Decimal("0.00")
        return cls(
            subtotal=nil,
            discount_amount=nil,
            net_after_discount=nil,
            vat=nil,
            grand_total=nil,
            amount_paid=nil,
            balance_due=nil,
            payment_status=PaymentStatus.PENDING,
        )

    def as_dict(self) -> dict:
        return {
            "subtotal": str(self.subtotal),
            "discount_amount": str(self.discount_amount),
            "net_after_discount": str(self.net_after_discount),
            "vat": str(self.vat),
            "grand_total": str(self.grand_total),
            "amount_paid": str(self.amount_paid),
            "balance_due": str(self.balance_due),
            "payment_status": self.payment_status.value,
        }
