"""Migration handler — applies pending Alembic migrations."""

import logging
from typing import Any

from trailpack.services.migration import run_migrations

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    result = run_migrations()
    logger.info("Migrations applied")
    return {"statusCode": 200, "body": result["status"]}
