# app/db/engine.py

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.core.config import settings


@lru_cache(maxsize=None)
def _engine_for(url: str, echo: bool) -> Engine:
    return create_engine(url, echo=echo, future=True)


def get_engine() -> Engine:
    # one pooled engine per database URL; set SQL_ECHO=true to see SQL printed in the terminal
    return _engine_for(settings.database_url, settings.sql_echo)
