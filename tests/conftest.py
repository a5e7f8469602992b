from __future__ import annotations

import pytest

import db.connection as connection


class FakeCursor:
    """Stands in for a psycopg2 RealDictCursor; replays the connection's canned rows."""

    def __init__(self, conn: FakeConnection) -> None:
        self.conn = conn
        self.rowcount = -1
        self._rows: list[dict] = []

    def __enter__(self) -> FakeCursor:
        return self

    def __exit__(self, *exc) -> None:
        return None

    def execute(self, sql, params=None) -> None:
        self.conn.executed.append((sql, params))
        if self.conn.fail_with is not None:
            raise self.conn.fail_with
        self._rows = list(self.conn.rows)
        self.rowcount = self.conn.rowcount

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def __iter__(self):
        return iter(self._rows)


class FakeConnection:
    def __init__(self, rows=None, rowcount: int = 0, fail_with: Exception | None = None) -> None:
        self.rows: list[dict] = rows or []
        self.rowcount = rowcount
        self.fail_with = fail_with
        self.executed: list[tuple] = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = 0

    def cursor(self) -> FakeCursor:
        return FakeCursor(self)

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1

    def close(self) -> None:
        self.closed = 1


class FakeDriver:
    """Replacement for psycopg2.connect that hands out FakeConnections."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.opened: list[FakeConnection] = []
        self.next_rows: list[dict] = []
        self.next_rowcount = 0
        self.next_error: Exception | None = None

    def __call__(self, dsn, **kwargs) -> FakeConnection:
        self.calls.append((dsn, kwargs))
        conn = FakeConnection(self.next_rows, self.next_rowcount, self.next_error)
        self.opened.append(conn)
        return conn

    @property
    def last(self) -> FakeConnection:
        return self.opened[-1]


@pytest.fixture
def db_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MYSQL_DSN", "host=localhost dbname=bookshelf")
    monkeypatch.setenv("MYSQL_USER", "shelf")
    monkeypatch.setenv("MYSQL_PASSWORD", "secret")


@pytest.fixture
def fake_driver(monkeypatch: pytest.MonkeyPatch, db_env) -> FakeDriver:
    driver = FakeDriver()
    monkeypatch.setattr(connection.psycopg2, "connect", driver)
    return driver


@pytest.fixture
def repo(fake_driver: FakeDriver):
    from repositories.book_repo import BookRepository

    repository = BookRepository()
    fake_driver.opened.clear()
    fake_driver.calls.clear()
    return repository
