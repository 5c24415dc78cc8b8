from __future__ import annotations

from enum import Enum


class PaymentStatus(str, Enum):
    """Payment state derived from the balance of a ledger."""

    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"


class ClassType(str, Enum):
    """How a course is delivered; selects which rate applies."""

    ONLINE = "online"
    OFFLINE = "offline"
    PRIVATE = "private"
    BATCH = "batch"
