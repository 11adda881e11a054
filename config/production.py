import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "staff_ops"),
}

MILEAGE_RATE = os.getenv("MILEAGE_RATE")
TARDY_CUTOFF = os.getenv("TARDY_CUTOFF")
DEFAULT_POOL_PERCENTAGE = os.getenv("DEFAULT_POOL_PERCENTAGE")
UNREPORTED_DAMAGE_MULTIPLIER = os.getenv("UNREPORTED_DAMAGE_MULTIPLIER")
WAREHOUSE_ADDRESS = os.getenv("WAREHOUSE_ADDRESS")

DEBUG = False
