"""Serialization of flat records (list of dicts) for downloads."""

from __future__ import annotations

import csv
import io
import json
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional, Sequence

from ...storage.store import json_default


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_csv(records: Sequence[Mapping[str, Any]], fieldnames: Optional[Sequence[str]] = None) -> str:
    """Header row then one row per record; every field quoted, quotes doubled."""

    if fieldnames is None:
        fieldnames = list(records[0].keys()) if records else []
    if not fieldnames:
        return ""

    out = io.StringIO()
    writer = csv.DictWriter(
        out,
        fieldnames=list(fieldnames),
        quoting=csv.QUOTE_ALL,
        lineterminator="\n",
        extrasaction="ignore",
    )
    writer.writeheader()
    for record in records:
        writer.writerow({k: _cell(record.get(k)) for k in fieldnames})
    return out.getvalue()


def to_json(records: Sequence[Mapping[str, Any]]) -> str:
    return json.dumps(list(records), default=json_default, ensure_ascii=False, indent=2)
