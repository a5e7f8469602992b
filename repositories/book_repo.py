"""
repositories/book_repo.py
-------------------------
Data access layer for the bookshelf.
All SQL queries related to the `books` table live here.
"""

from typing import Optional

from db.connection import get_connection, release_connection
from db.init_db import TABLE_NAME, create_tables, quote_ident
from exceptions import ValidationError
from models.book import COLUMN_NAMES
from utils.logger import get_logger

logger = get_logger(__name__)


class BookRepository:
    """
    Repository for CRUD operations on the books table.

    Creating an instance makes sure the table exists. Each public method
    opens its own connection and closes it before returning.
    """

    def __init__(self):
        create_tables()
        self.column_names: tuple[str, ...] = COLUMN_NAMES

    # ── VALIDATION ────────────────────────────────────────

    def _verify_book(self, book: dict) -> None:
        """Raise ValidationError if `book` has keys outside the schema."""
        invalid = set(book) - set(self.column_names)
        if invalid:
            raise ValidationError(
                f'unsupported book properties: "{", ".join(sorted(invalid))}"'
            )

    # ── LIST ──────────────────────────────────────────────

    def list_books(self, limit: int = 10, cursor: Optional[int] = None) -> dict:
        """
        Fetch one page of books ordered by id.

        One extra row is requested beyond `limit`; if it comes back there is
        another page, and the returned cursor is the id of the last book on
        this page.

        Args:
            limit: Maximum number of books to return.
            cursor: Id of the last book of the previous page, or None for
                the first page.

        Returns:
            Dict with keys 'books' (list of row dicts) and 'cursor'
            (int or None when this is the last page).
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValidationError(f"limit must be a positive integer, got {limit!r}")

        if cursor is not None:
            sql = f"SELECT * FROM {TABLE_NAME} WHERE id > %s ORDER BY id LIMIT %s;"
            params: tuple = (int(cursor), limit + 1)
        else:
            sql = f"SELECT * FROM {TABLE_NAME} ORDER BY id LIMIT %s;"
            params = (limit + 1,)

        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                rows: list[dict] = []
                new_cursor = None
                for row in cur:
                    if len(rows) == limit:
                        new_cursor = rows[-1]["id"]
                        break
                    rows.append(dict(row))
            return {"books": rows, "cursor": new_cursor}
        finally:
            release_connection(conn)

    # ── CREATE ────────────────────────────────────────────

    def create(self, book: dict, id: Optional[int] = None) -> int:
        """
        Insert a new book.

        Args:
            book: Mapping of column name to value; only these columns are set.
            id: Optional explicit primary key to use instead of a generated one.

        Returns:
            The id of the inserted row.
        """
        self._verify_book(book)
        values = dict(book)
        if id is not None:
            values["id"] = id
        if values.get("id") is None:
            values.pop("id", None)

        if values:
            names = list(values)
            sql = "INSERT INTO {} ({}) VALUES ({}) RETURNING id;".format(
                TABLE_NAME,
                ", ".join(quote_ident(n) for n in names),
                ", ".join(f"%({n})s" for n in names),
            )
        else:
            sql = f"INSERT INTO {TABLE_NAME} DEFAULT VALUES RETURNING id;"

        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, values)
                book_id = cur.fetchone()["id"]
                if "id" in values:
                    # Keep the serial sequence ahead of explicitly chosen ids.
                    cur.execute(
                        f"SELECT setval(pg_get_serial_sequence('{TABLE_NAME}', 'id'), "
                        f"(SELECT MAX(id) FROM {TABLE_NAME}));"
                    )
            conn.commit()
            logger.info(f"Created book #{book_id}")
            return book_id
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to create book: {e}")
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def read(self, id: int) -> Optional[dict]:
        """
        Fetch a single book by id.

        Returns:
            The row as a dict, or None if no book has that id.
        """
        sql = f"SELECT * FROM {TABLE_NAME} WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (id,))
                row = cur.fetchone()
                return dict(row) if row else None
        finally:
            release_connection(conn)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, book: dict) -> int:
        """
        Overwrite an existing book.

        Every column except id is assigned: columns missing from `book`
        are set to NULL.

        Args:
            book: Mapping of column name to value; must contain 'id'.

        Returns:
            Number of rows updated (0 if the id does not exist).
        """
        self._verify_book(book)
        if book.get("id") is None:
            raise ValidationError("book id is required for update")

        values = dict.fromkeys(self.column_names)
        values.update(book)
        assignments = ", ".join(
            f"{quote_ident(n)} = %({n})s" for n in self.column_names if n != "id"
        )
        sql = f"UPDATE {TABLE_NAME} SET {assignments} WHERE id = %(id)s;"

        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, values)
                updated = cur.rowcount
            conn.commit()
            if updated:
                logger.info(f"Updated book #{book['id']}")
            return updated
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update book #{book['id']}: {e}")
            raise
        finally:
            release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, id: int) -> int:
        """
        Delete a book by id.

        Returns:
            Number of rows deleted (0 or 1).
        """
        sql = f"DELETE FROM {TABLE_NAME} WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (id,))
                deleted = cur.rowcount
            conn.commit()
            if deleted:
                logger.info(f"Deleted book #{id}")
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete book #{id}: {e}")
            raise
        finally:
            release_connection(conn)

    list = list_books
