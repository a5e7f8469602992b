"""
exceptions.py
-------------
Errors raised by the bookshelf data layer itself.
Driver failures are not wrapped: they surface as psycopg2 exceptions.
"""


class BookshelfError(Exception):
    """Base class for data layer errors."""


class ConfigurationError(BookshelfError):
    """A required environment variable is missing or empty."""


class ValidationError(BookshelfError, ValueError):
    """A book payload or call argument was rejected before any SQL ran."""
