import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workforce_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

COMPANY_NAME = os.getenv("COMPANY_NAME", "HRMS")
CURRENCY = os.getenv("CURRENCY", "SAR")

OVERTIME_MULTIPLIER = os.getenv("OVERTIME_MULTIPLIER", "1.5")
GOSI_RATE = os.getenv("GOSI_RATE", "0.11")
OTHER_DEDUCTIONS_RATE = os.getenv("OTHER_DEDUCTIONS_RATE", "0.02")
EXPECTED_WORKING_DAYS = int(os.getenv("EXPECTED_WORKING_DAYS", "22"))
STANDARD_DAY_HOURS = int(os.getenv("STANDARD_DAY_HOURS", "8"))
