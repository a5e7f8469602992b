from __future__ import annotations

from datetime import date

from models.book import COLUMN_NAMES, Book


def test_column_names_follow_table_order() -> None:
    assert COLUMN_NAMES == (
        "id",
        "title",
        "author",
        "publishedDate",
        "imageUrl",
        "description",
        "createdBy",
        "createdById",
    )


def test_from_row_ignores_unknown_keys() -> None:
    book = Book.from_row({"id": 3, "title": "Dune", "extra": "x"})

    assert book.id == 3
    assert book.title == "Dune"
    assert book.author is None


def test_to_dict_drops_unset_fields() -> None:
    book = Book(title="Dune", author="Frank Herbert", publishedDate=date(1965, 8, 1))

    assert book.to_dict() == {
        "title": "Dune",
        "author": "Frank Herbert",
        "publishedDate": date(1965, 8, 1),
    }
    assert set(book.to_dict(include_none=True)) == set(COLUMN_NAMES)


def test_str_mentions_title_and_author() -> None:
    assert str(Book(id=1, title="Dune", author="Frank Herbert")) == "#1 Dune by Frank Herbert"
    assert str(Book()) == "#None (untitled)"
