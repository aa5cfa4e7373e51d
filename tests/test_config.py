import importlib
from decimal import Decimal

import pytest

from config import get_settings_module
from workforce_finance.container import build_store
from workforce_finance.core.policy import FinancePolicy
from workforce_finance.storage.memory_store import InMemoryKeyValueStore


@pytest.mark.parametrize(
    "env, module",
    [("prod", "config.production"), ("Testing", "config.testing"), ("staging", "config.development")],
)
def test_settings_module_by_env(env, module):
    assert get_settings_module(env) == module


def test_app_env_is_read_when_no_env_given(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "config.production"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"


def test_testing_settings_use_memory_store_and_default_policy():
    settings = importlib.import_module("config.testing")

    policy = FinancePolicy.from_settings(settings)

    assert settings.STORE_BACKEND == "memory"
    assert policy.gosi_rate == Decimal("0.11")
    assert policy.expected_working_days == 22
    assert isinstance(build_store(backend=settings.STORE_BACKEND), InMemoryKeyValueStore)


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError):
        build_store(backend="redis")
