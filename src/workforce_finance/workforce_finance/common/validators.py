from __future__ import annotations

import re
from typing import Any

from ..core.exceptions import ValidationError

SAUDI_PHONE_RE = re.compile(r"^\+966[0-9]{9}$")


def is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def is_positive_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return float(value) > 0
    except (TypeError, ValueError):
        return False


def raise_if_errors(errors: list[str], what: str) -> None:
    if errors:
        raise ValidationError(f"Invalid {what}: " + "; ".join(errors), errors)
