from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Protocol

EMPLOYEES_KEY = "workforce_employees"
PROJECTS_KEY = "workforce_projects"
ATTENDANCE_KEY = "workforce_attendance"
INSIGHTS_KEY = "workforce_insights"


class KeyValueStore(Protocol):
    """Persistence boundary: one JSON document (a list of records) per key.

    Note (DIP): repositories depend on this interface, not on a concrete DB.
    No transactional guarantees across keys.
    """

    def get(self, key: str) -> Optional[list[dict]]:
        raise NotImplementedError

    def set(self, key: str, value: list[dict]) -> None:
        raise NotImplementedError


def json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(value: Any) -> str:
    return json.dumps(value, default=json_default, ensure_ascii=False)


def decode_json(raw: Optional[str]) -> Optional[list[dict]]:
    if raw is None:
        return None
    return json.loads(raw)
