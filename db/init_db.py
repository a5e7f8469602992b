"""
db/init_db.py
-------------
Creates the `books` table if it does not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from models.book import BOOK_COLUMNS
from utils.logger import get_logger

logger = get_logger(__name__)

TABLE_NAME = "books"


def quote_ident(name: str) -> str:
    """Double-quote a column name so its camelCase survives case folding."""
    return '"' + name.replace('"', '""') + '"'


def build_schema_sql() -> str:
    """Render the CREATE TABLE statement from BOOK_COLUMNS."""
    column_text = ",\n    ".join(
        f"{quote_ident(name)} {definition}" for name, definition in BOOK_COLUMNS
    )
    return f"CREATE TABLE IF NOT EXISTS {TABLE_NAME} (\n    {column_text}\n);"


def create_tables() -> None:
    """
    Execute the schema SQL to create the books table.
    Safe to call multiple times (uses IF NOT EXISTS); an existing table is
    left as is, even if its columns differ.
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(build_schema_sql())
        conn.commit()
        logger.info("Books schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    create_tables()
    print("Books table is ready.")
