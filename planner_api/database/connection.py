"""Connection pool and cursor factory."""

import logging
from contextlib import contextmanager

import psycopg2
from psycopg2.extras import RealDictCursor
from psycopg2.pool import ThreadedConnectionPool

from ..errors import PoolError, StoreError

logger = logging.getLogger(__name__)


def create_pool(settings):
    """Create the process-wide connection pool from settings."""
    logger.info("Opening connection pool (min=%d, max=%d)", settings.pool_min, settings.pool_max)
    return ThreadedConnectionPool(settings.pool_min, settings.pool_max, settings.database_url)


def _rollback(conn):
    """Roll back, tolerating a connection the server already dropped."""
    if conn.closed:
        return
    try:
        conn.rollback()
    except psycopg2.Error as e:
        logger.warning("Rollback failed: %s", e)


@contextmanager
def get_cursor(pool):
    """Check a connection out of ``pool`` and yield a RealDictCursor.

    Commits when the block succeeds, rolls back when it raises, and always
    returns the connection to the pool. Driver errors come out as StoreError.
    A connection that was closed underneath us is discarded, not reused.
    """
    try:
        conn = pool.getconn()
    except psycopg2.Error as e:
        raise PoolError(str(e)) from e
    try:
        with conn.cursor(cursor_factory=RealDictCursor) as cur:
            yield cur
        conn.commit()
    except psycopg2.Error as e:
        _rollback(conn)
        raise StoreError(e) from e
    except Exception:
        _rollback(conn)
        raise
    finally:
        if conn.closed:
            pool.putconn(conn, close=True)
        else:
            pool.putconn(conn)
