"""
db/connection.py
----------------
Opens database connections for the repositories.
No pooling: every public repository call opens its own connection with
get_connection() and closes it with release_connection().
"""

import psycopg2
from psycopg2 import extras

from config import get_db_settings
from utils.logger import get_logger

logger = get_logger(__name__)


def get_connection():
    """
    Open a new connection using the MYSQL_* environment variables.

    Rows fetched through this connection are dicts keyed by column name.

    Returns:
        A psycopg2 connection object.

    Raises:
        ConfigurationError: If a required environment variable is missing.
        psycopg2.OperationalError: If the database is unreachable.
    """
    settings = get_db_settings()
    try:
        return psycopg2.connect(
            settings.dsn,
            user=settings.user,
            password=settings.password,
            cursor_factory=extras.RealDictCursor,
        )
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to connect to the books database: {e}")
        raise


def release_connection(conn) -> None:
    """
    Close a connection opened by get_connection().

    Args:
        conn: The psycopg2 connection to close.
    """
    if conn is not None and not conn.closed:
        conn.close()
