import logging

import psycopg
from langgraph.checkpoint.memory import InMemorySaver

from config.settings import AppSettings
from persistence.encrypted_postgres_saver import EncryptedPostgresSaver

logger = logging.getLogger(__name__)


def build_checkpointer(settings: AppSettings):
    if settings.checkpointer == "memory":
        logger.info("Using in-memory checkpointer")
        return InMemorySaver()

    if settings.postgres is None:
        raise RuntimeError("postgres checkpointer selected but PG_* settings are missing")

    pg = settings.postgres
    conn = psycopg.connect(**pg.connect_kwargs())
    conn.autocommit = True

    checkpointer = EncryptedPostgresSaver(conn)
    checkpointer.setup()
    logger.info("Using encrypted postgres checkpointer on %s:%s/%s", pg.host, pg.port, pg.dbname)
    return checkpointer
