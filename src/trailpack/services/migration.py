"""Run Alembic migrations programmatically — invoked via MigrateFunction Lambda."""

import io
import logging
import os

from alembic.config import Config

from alembic import command
from trailpack.config import get_config
from trailpack.db import Database

logger = logging.getLogger(__name__)


def run_migrations(revision: str = "head") -> dict[str, str]:
    database = Database(get_config())

    root = os.environ.get("LAMBDA_TASK_ROOT", "/var/task")
    cfg = Config(os.path.join(root, "alembic.ini"))
    cfg.set_main_option("script_location", os.path.join(root, "alembic"))
    # Kept out of the ini options, which treat "%" as interpolation
    cfg.attributes["database_url"] = database.render_url()

    stderr_buf = io.StringIO()
    stream_handler = logging.StreamHandler(stderr_buf)
    alembic_logger = logging.getLogger("alembic")
    alembic_logger.addHandler(stream_handler)

    logger.info("Upgrading %s to %s", database.render_url(hide_password=True), revision)
    try:
        command.upgrade(cfg, revision)
        output = stderr_buf.getvalue()
        logger.info("Migration complete: %s", output)
        return {"status": "success", "output": output}
    except Exception as e:
        logger.error("Migration failed: %s", e)
        raise
    finally:
        alembic_logger.removeHandler(stream_handler)
