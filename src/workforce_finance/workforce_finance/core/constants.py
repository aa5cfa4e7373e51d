"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

MONEY_PLACES = Decimal("0.01")

DEFAULT_OVERTIME_MULTIPLIER = Decimal("1.5")
DEFAULT_GOSI_RATE = Decimal("0.11")
DEFAULT_OTHER_DEDUCTIONS_RATE = Decimal("0.02")
DEFAULT_EXPECTED_WORKING_DAYS = 22
DEFAULT_STANDARD_DAY_HOURS = 8
DEFAULT_CURRENCY = "SAR"
DEFAULT_COMPANY_NAME = "HRMS"

DEFAULT_TREND_WEEKS = 5
DEFAULT_PATTERN_DAYS = 30

UTILIZATION_TARGET = Decimal("85")
PROFIT_MARGIN_FLOOR = Decimal("20")
PRODUCTIVITY_TARGET = Decimal("100")
PROJECT_MARGIN_OPPORTUNITY = Decimal("25")
PROJECT_ATTENDANCE_FLOOR = Decimal("80")
DOCUMENT_WARNING_DAYS = 30
DOCUMENT_URGENT_DAYS = 7
MARGIN_ALERT_DEADLINE_DAYS = 7

TRADE_DEMAND_HIGH = Decimal("30")
TRADE_DEMAND_MEDIUM = Decimal("15")
