import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "training_office_test"),
}

VAT_RATE = "0.05"
MAX_DISCOUNT_PERCENT = "20"
CURRENCY = "AED"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
