"""Create the college database and apply ``database/schema.sql``.

Usage: ``APP_ENV=production python scripts/init_db.py``
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.college_admin.college_admin.database.bootstrap import apply_schema
from src.college_admin.college_admin.main import SCHEMA_PATH


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    tables = apply_schema(db_config, schema_path=SCHEMA_PATH)
    print(f"Schema applied to {db_config.get('database')} on {db_config.get('host')}: {', '.join(sorted(tables))}")


if __name__ == "__main__":
    main()
