from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Optional, Sequence

from ..common.formatters import format_money
from ..common.logging_utils import get_logger
from ..common.validators import parse_decimal
from ..core.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_VAT_RATE,
    DISCOUNT_LIMIT_MESSAGE,
    MAX_DISCOUNT_PERCENT,
)
from ..core.enums import ClassType, PaymentStatus
from ..core.exceptions import ValidationError
from ..courses.model import Course
from ..courses.repository import CourseRepository
from ..fees.calculator import compute_ledger
from ..fees.model import LineItem
from .model import PricingQuote, QuotationItem, RegistrationEntry

logger = get_logger("training_office.pricing")

_NO_VAT = Decimal("0")


class PricingService:
    """Prices every form that takes money through the shared fee calculator.

    Each flow only decides which line items it has and whether VAT applies;
    the arithmetic itself lives in ``fees.calculator``.
    """

    def __init__(
        self,
        courses: CourseRepository,
        *,
        vat_rate: Decimal = DEFAULT_VAT_RATE,
        max_discount: Decimal = MAX_DISCOUNT_PERCENT,
        currency: str = DEFAULT_CURRENCY,
    ):
        self._courses = courses
        self._vat_rate = Decimal(vat_rate)
        self._max_discount = Decimal(max_discount)
        self._currency = currency

    def _get_course(self, course_id: int) -> Course:
        course = self._courses.get_by_id(int(course_id))
        if not course:
            raise ValidationError(f"Course {course_id} does not exist", field="course_id")
        return course

    def _discount_warnings(self, lines: Sequence[LineItem]) -> tuple[str, ...]:
        warnings: list[str] = []
        for line in lines:
            percent = parse_decimal(line.discount_percent, "discount_percent", default=Decimal("0"), max_digits=None)
            if percent > self._max_discount:
                message = DISCOUNT_LIMIT_MESSAGE.format(limit=f"{self._max_discount.normalize():f}")
            elif percent < 0:
                message = "Discount cannot be negative"
            else:
                continue
            if message not in warnings:
                warnings.append(message)
        return tuple(warnings)

    def _quote(self, flow: str, lines: Iterable[LineItem], *, vat_rate: Decimal, amount_paid: Any) -> PricingQuote:
        lines = tuple(lines)
        summary = compute_ledger(lines, vat_rate, amount_paid, max_discount=self._max_discount)
        warnings = self._discount_warnings(lines)
        for w in warnings:
            logger.warning("%s quote: %s", flow, w)
        logger.debug(
            "%s quote: lines=%d grand_total=%s status=%s",
            flow,
            len(lines),
            summary.grand_total,
            summary.payment_status.value,
        )
        return PricingQuote(summary=summary, lines=lines, warnings=warnings)

    def quote_ledger(self, lines: Iterable[LineItem], *, vat_rate: Any, amount_paid: Any = None) -> PricingQuote:
        """Free-form preview: caller supplies the line items and VAT rate."""
        return self._quote("ledger", lines, vat_rate=vat_rate, amount_paid=amount_paid)

    def quote_student_fee(
        self,
        course_id: int,
        *,
        discount_percent: Any = 0,
        amount_paid: Any = None,
        class_type: Optional[ClassType] = None,
    ) -> PricingQuote:
        """Simple student registration: one course, no VAT."""
        course = self._get_course(course_id)
        line = LineItem(
            unit_price=course.rate_for(class_type),
            discount_percent=discount_percent,
            description=course.name,
        )
        return self._quote("student fee", [line], vat_rate=_NO_VAT, amount_paid=amount_paid)

    def quote_course_registration(
        self,
        class_type: Optional[ClassType],
        entries: Sequence[RegistrationEntry],
        *,
        amount_paid: Any = None,
    ) -> PricingQuote:
        """Multi-course registration, priced by class type, VAT applied."""
        lines = []
        for entry in entries:
            course = self._get_course(entry.course_id)
            lines.append(
                LineItem(
                    unit_price=course.rate_for(class_type),
                    discount_percent=entry.discount_percent,
                    description=course.name,
                )
            )
        return self._quote("registration", lines, vat_rate=self._vat_rate, amount_paid=amount_paid)

    def quote_quotation(
        self,
        items: Sequence[QuotationItem],
        *,
        discount_percent: Any = 0,
        amount_paid: Any = None,
    ) -> PricingQuote:
        """Corporate quotation: course fee x persons, one discount for all lines."""
        lines = []
        for item in items:
            course = self._get_course(item.course_id)
            lines.append(
                LineItem(
                    unit_price=course.fee,
                    quantity=item.number_of_persons,
                    discount_percent=discount_percent,
                    description=course.name,
                )
            )
        return self._quote("quotation", lines, vat_rate=_NO_VAT, amount_paid=amount_paid)

    def quote_proposal(self, total_amount: Any, *, discount_percent: Any = 0, amount_paid: Any = None) -> PricingQuote:
        line = LineItem(unit_price=total_amount, discount_percent=discount_percent, description="Proposal")
        return self._quote("proposal", [line], vat_rate=_NO_VAT, amount_paid=amount_paid)

    def quote_expense(self, amount: Any, *, amount_paid: Any = None) -> PricingQuote:
        line = LineItem(unit_price=amount, description="Expense")
        return self._quote("expense", [line], vat_rate=_NO_VAT, amount_paid=amount_paid)

    def to_ui(self, quote: PricingQuote) -> dict:
        s = quote.summary
        status = s.payment_status
        label = {
            PaymentStatus.PAID: "Paid",
            PaymentStatus.PARTIAL: "Partially paid",
            PaymentStatus.PENDING: "Pending",
        }.get(status, status.value)

        css = {
            PaymentStatus.PAID: "bg-success",
            PaymentStatus.PARTIAL: "bg-warning text-dark",
            PaymentStatus.PENDING: "bg-secondary",
        }.get(status, "bg-secondary")

        return {
            "subtotal": format_money(s.subtotal, self._currency),
            "discount_amount": format_money(s.discount_amount, self._currency),
            "net_after_discount": format_money(s.net_after_discount, self._currency),
            "vat": format_money(s.vat, self._currency),
            "grand_total": format_money(s.grand_total, self._currency),
            "amount_paid": format_money(s.amount_paid, self._currency),
            "balance_due": format_money(s.balance_due, self._currency),
            "status": label,
            "css_class": css,
        }
