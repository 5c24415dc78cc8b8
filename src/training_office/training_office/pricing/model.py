from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..fees.model import LedgerSummary, LineItem


@dataclass(frozen=True)
class RegistrationEntry:
    """A course picked on the registration form, with its own discount."""

    course_id: int
    discount_percent: Any = 0


@dataclass(frozen=True)
class QuotationItem:
    """A course quoted for a number of persons (corporate quotations)."""

    course_id: int
    number_of_persons: Any = 1


@dataclass(frozen=True)
class PricingQuote:
    summary: LedgerSummary
    lines: tuple[LineItem, ...] = ()
    warnings: tuple[str, ...] = field(default_factory=tuple)
