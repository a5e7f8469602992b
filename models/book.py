"""
models/book.py
--------------
Domain model for bookshelf records.

`BOOK_COLUMNS` is the single source of truth for the `books` table: the
schema bootstrap builds its DDL from it and the repository validates
payload field names against it.
"""

from dataclasses import asdict, dataclass, fields
from datetime import date
from typing import Optional

# (column name, SQL definition), in table order.
BOOK_COLUMNS: tuple[tuple[str, str], ...] = (
    ("id", "SERIAL PRIMARY KEY"),
    ("title", "VARCHAR(255)"),
    ("author", "VARCHAR(255)"),
    ("publishedDate", "DATE"),
    ("imageUrl", "VARCHAR(255)"),
    ("description", "VARCHAR(255)"),
    ("createdBy", "VARCHAR(255)"),
    ("createdById", "VARCHAR(255)"),
)

COLUMN_NAMES: tuple[str, ...] = tuple(name for name, _ in BOOK_COLUMNS)


@dataclass
class Book:
    """
    Represents a single book on the shelf.

    Attributes:
        id: Database primary key (None for new records).
        title: Book title.
        author: Author name(s).
        publishedDate: Publication date.
        imageUrl: Cover image URL.
        description: Short description or blurb.
        createdBy: Display name of the user who added the book.
        createdById: Identifier of the user who added the book.
    """
    title: Optional[str] = None
    author: Optional[str] = None
    publishedDate: Optional[date] = None
    imageUrl: Optional[str] = None
    description: Optional[str] = None
    createdBy: Optional[str] = None
    createdById: Optional[str] = None
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: dict) -> "Book":
        """Build a Book from a result row, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in row.items() if k in known})

    def to_dict(self, include_none: bool = False) -> dict:
        """
        Return the book as a payload for BookRepository.create/update.

        Fields left as None are dropped unless `include_none` is set.
        """
        data = asdict(self)
        if include_none:
            return data
        return {k: v for k, v in data.items() if v is not None}

    def __str__(self) -> str:
        by = f" by {self.author}" if self.author else ""
        return f"#{self.id} {self.title or '(untitled)'}{by}"
