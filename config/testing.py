import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workforce_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORE_BACKEND = "memory"

AUTO_INIT_DB = False
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

COMPANY_NAME = "HRMS"
CURRENCY = "SAR"

OVERTIME_MULTIPLIER = "1.5"
GOSI_RATE = "0.11"
OTHER_DEDUCTIONS_RATE = "0.02"
EXPECTED_WORKING_DAYS = 22
STANDARD_DAY_HOURS = 8
