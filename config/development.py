import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workforce_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# mysql | memory
STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup (skipped when employees exist)
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))

COMPANY_NAME = os.getenv("COMPANY_NAME", "HRMS")
CURRENCY = os.getenv("CURRENCY", "SAR")

# Pay policy
OVERTIME_MULTIPLIER = os.getenv("OVERTIME_MULTIPLIER", "1.5")
GOSI_RATE = os.getenv("GOSI_RATE", "0.11")
OTHER_DEDUCTIONS_RATE = os.getenv("OTHER_DEDUCTIONS_RATE", "0.02")
EXPECTED_WORKING_DAYS = int(os.getenv("EXPECTED_WORKING_DAYS", "22"))
STANDARD_DAY_HOURS = int(os.getenv("STANDARD_DAY_HOURS", "8"))
