"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_VAT_RATE = Decimal("0.05")
MAX_DISCOUNT_PERCENT = Decimal("20")
DEFAULT_CURRENCY = "AED"

MONEY_PLACES = Decimal("0.01")
DISCOUNT_LIMIT_MESSAGE = "Maximum discount allowed is {limit}%"

# Inputs must stay below 10**MAX_AMOUNT_DIGITS; keeps every total quantizable
MAX_AMOUNT_DIGITS = 12
LEDGER_PRECISION = 60
