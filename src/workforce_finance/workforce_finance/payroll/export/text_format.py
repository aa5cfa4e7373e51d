from __future__ import annotations

from datetime import datetime
from decimal import Decimal


def money(value: Decimal) -> str:
    return f"{value:.2f}"


def hours(value: Decimal) -> str:
    """160 -> "160", 7.50 -> "7.5"."""

    return format(value.normalize(), "f") if value else "0"


def timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S")


def percent_label(rate: Decimal) -> str:
    return f"{(rate * 100).normalize():f}%"
