"""Example: price a registration through the service layer (no Flask).

Controllers are a thin layer; the arithmetic lives in fees.calculator and the
flows in PricingService.
"""

import importlib
from decimal import Decimal

from config import get_settings_module

from src.training_office.training_office.container import build_container
from src.training_office.training_office.core.enums import ClassType
from src.training_office.training_office.fees.calculator import compute_ledger
from src.training_office.training_office.fees.model import LineItem
from src.training_office.training_office.pricing.model import RegistrationEntry


def main():
    summary = compute_ledger([LineItem(unit_price="1000", discount_percent=10)], Decimal("0.05"), "500")
    print(summary.as_dict())

    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    quote = container.pricing_service.quote_course_registration(
        ClassType.ONLINE,
        [RegistrationEntry(course_id=1, discount_percent=10)],
        amount_paid="200",
    )
    print(container.pricing_service.to_ui(quote), quote.warnings)


if __name__ == "__main__":
    main()
