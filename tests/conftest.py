from __future__ import annotations

from datetime import date, datetime

import pytest

from factories import TODAY
from workforce_finance.container import build_container
from workforce_finance.storage.memory_store import InMemoryKeyValueStore


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def fixed_now(monkeypatch):
    """Pin ``now_local`` in every module that stamps records."""

    now = datetime(2025, 1, 15, 9, 30)
    for module in (
        "workforce_finance.employees.service",
        "workforce_finance.projects.service",
        "workforce_finance.attendance.service",
        "workforce_finance.payroll.controller",
    ):
        monkeypatch.setattr(f"{module}.now_local", lambda: now)
    return now


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def container(store):
    return build_container(store=store)
