"""Lazy-initialized database client — reused across warm Lambda invocations."""

from functools import lru_cache

from trailpack.config import get_config
from trailpack.db import Database


@lru_cache(maxsize=1)
def get_database() -> Database:
    database = Database(get_config())
    database.connect()
    return database
