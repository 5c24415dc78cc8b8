import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "training_office"),
}

# Money rules shared by every pricing form
VAT_RATE = os.getenv("VAT_RATE", "0.05")
MAX_DISCOUNT_PERCENT = os.getenv("MAX_DISCOUNT_PERCENT", "20")
CURRENCY = os.getenv("CURRENCY", "AED")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
