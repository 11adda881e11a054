import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "staff_ops"),
}

# Company policy (see CompanyPolicy.from_settings)
MILEAGE_RATE = os.getenv("MILEAGE_RATE", "0.60")
TARDY_CUTOFF = os.getenv("TARDY_CUTOFF", "07:15")
DEFAULT_POOL_PERCENTAGE = os.getenv("DEFAULT_POOL_PERCENTAGE", "4.5")
UNREPORTED_DAMAGE_MULTIPLIER = os.getenv("UNREPORTED_DAMAGE_MULTIPLIER", "2")

DEBUG = True
