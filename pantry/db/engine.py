# pantry/db/engine.py

import os
from functools import lru_cache
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

DEFAULT_DB_URL = "sqlite:///db.sqlite"  # file in project root


def get_db_url() -> str:
    return os.environ.get("PANTRY_DB_URL", DEFAULT_DB_URL)


@lru_cache
def _engine_for(db_url: str) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    return create_engine(db_url, future=True)


def get_engine(db_url: Optional[str] = None) -> Engine:
    return _engine_for(db_url or get_db_url())
