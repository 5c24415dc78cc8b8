from __future__ import annotations

import importlib
from decimal import Decimal

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_utils import configure_logging
from .container import build_container
from .fees.controller import register as register_fees
from .pricing.controller import register as register_pricing


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logger = configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    container = build_container(
        db_config=db_config,
        vat_rate=Decimal(str(getattr(settings, "VAT_RATE", "0.05"))),
        max_discount=Decimal(str(getattr(settings, "MAX_DISCOUNT_PERCENT", "20"))),
        currency=str(getattr(settings, "CURRENCY", "AED")),
    )

    register_fees(app, container)
    register_pricing(app, container)

    return app
