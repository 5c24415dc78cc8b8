from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..core.enums import ClassType


@dataclass(frozen=True)
class Course:
    """Domain entity: a course offered by the institute.

    ``fee`` is the base price; the per-class-type rates override it when set.
    """

    course_id: int
    name: str
    fee: Decimal
    online_rate: Optional[Decimal] = None
    offline_rate: Optional[Decimal] = None
    private_rate: Optional[Decimal] = None
    batch_rate: Optional[Decimal] = None
    duration: Optional[str] = None
    active: bool = True

    def rate_for(self, class_type: Optional[ClassType]) -> Decimal:
        rate = {
            ClassType.ONLINE: self.online_rate,
            ClassType.OFFLINE: self.offline_rate,
            ClassType.PRIVATE: self.private_rate,
            ClassType.BATCH: self.batch_rate,
        }.get(class_type)
        if rate is not None and rate > 0:
            return rate
        return self.fee
