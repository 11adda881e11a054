import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "staff_ops_test"),
}

MILEAGE_RATE = "0.60"
TARDY_CUTOFF = "07:15"
DEFAULT_POOL_PERCENTAGE = "4.5"
UNREPORTED_DAMAGE_MULTIPLIER = "2"

DEBUG = False
TESTING = True
