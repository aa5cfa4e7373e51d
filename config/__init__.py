import os

_SETTINGS_BY_ENV = {
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
}


def get_settings_module(env: str | None = None) -> str:
    """Dotted path of the settings module for ``env`` (APP_ENV when omitted)."""

    env = (env or os.getenv("APP_ENV") or "development").strip().lower()
    return _SETTINGS_BY_ENV.get(env, "config.development")
