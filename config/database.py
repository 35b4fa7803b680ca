"""
Database configuration for the meuapp API.

The whole service runs on a single SQLite file. The file is created on
first connection if it does not exist yet.
"""
import os
from pathlib import Path


def get_database_config(base_dir: Path) -> dict:
    """
    Returns the Django database configuration for the store.

    Supports:
    - MEUAPP_DB_PATH: explicit path to the SQLite file
    - Fallback to <base_dir>/meuapp.db
    """
    db_path = os.getenv('MEUAPP_DB_PATH')
    name = Path(db_path).expanduser() if db_path else base_dir / 'meuapp.db'

    return {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': name,
    }
