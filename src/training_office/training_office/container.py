from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .core.constants import DEFAULT_CURRENCY, DEFAULT_VAT_RATE, MAX_DISCOUNT_PERCENT
from .courses.mysql_course_repository import MySQLCourseRepository
from .courses.repository import CourseRepository
from .database.connection import DBConfig, DatabaseConnection
from .pricing.service import PricingService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    courses_repo: CourseRepository

    pricing_service: PricingService


def build_container(
    *,
    db_config: dict,
    vat_rate: Decimal = DEFAULT_VAT_RATE,
    max_discount: Decimal = MAX_DISCOUNT_PERCENT,
    currency: str = DEFAULT_CURRENCY,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    courses_repo = MySQLCourseRepository(conn)

    pricing_service = PricingService(
        courses_repo,
        vat_rate=vat_rate,
        max_discount=max_discount,
        currency=currency,
    )

    return Container(
        conn=conn,
        courses_repo=courses_repo,
        pricing_service=pricing_service,
    )
