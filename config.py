"""
config.py
---------
Central configuration module. Loads the .env file (if any) and exposes
the environment variables the bookshelf data layer depends on.

Database credentials are read at call time through ``get_db_settings()``
so that every new connection sees the current process environment.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from exceptions import ConfigurationError

load_dotenv()


# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Database ──────────────────────────────────────────────
DSN_VAR = "MYSQL_DSN"
USER_VAR = "MYSQL_USER"
PASSWORD_VAR = "MYSQL_PASSWORD"

_MISSING_HINTS = {
    DSN_VAR: "to your data source name, e.g. 'host=localhost dbname=bookshelf'",
    USER_VAR: "to your database user name",
    PASSWORD_VAR: "to your database password",
}


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection parameters for the books database."""
    dsn: str
    user: str
    password: str


def _require(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ConfigurationError(
            f"Set the environment variable {name} {_MISSING_HINTS[name]}."
        )
    return value


def get_db_settings() -> DatabaseSettings:
    """
    Read the database connection parameters from the environment.

    Raises:
        ConfigurationError: If MYSQL_DSN, MYSQL_USER or MYSQL_PASSWORD
            is unset or empty.
    """
    return DatabaseSettings(
        dsn=_require(DSN_VAR),
        user=_require(USER_VAR),
        password=_require(PASSWORD_VAR),
    )
