from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "workforce_finance"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from workforce_finance.common.datetime_utils import today_local
from workforce_finance.common.logging_setup import configure_logging
from workforce_finance.container import build_store
from workforce_finance.database.bootstrap import seed_store


def main() -> None:
    parser = argparse.ArgumentParser(description="Load the demo workforce into the configured store.")
    parser.add_argument("--force", action="store_true", help="overwrite existing collections")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    store = build_store(
        backend=str(getattr(settings, "STORE_BACKEND", "mysql")).lower(),
        db_config=dict(settings.DB_CONFIG),
    )

    if seed_store(store, today=today_local(), force=args.force):
        print("OK: Seeded demo workforce data")
    else:
        print("SKIP: store already has employees (use --force to overwrite)")


if __name__ == "__main__":
    main()
