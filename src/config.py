"""Environment configuration for the movie catalog."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

TRUTHY = {"1", "true", "yes", "on"}


class ConfigurationError(RuntimeError):
    """Raised when required settings are missing from the environment."""


def _as_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in TRUTHY


@dataclass
class AppConfig:
    """Settings read from the process environment at startup."""

    database_url: str
    sql_echo: bool = False
    log_level: str = "INFO"
    log_file: str = "movie_catalog.log"
    debug: bool = False


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build an AppConfig from ``environ`` (defaults to ``os.environ`` plus .env)."""
    if environ is None:
        load_dotenv()
        environ = os.environ

    database_url = (environ.get("DATABASE_URL") or "").strip()
    if not database_url:
        raise ConfigurationError('Could not find "DATABASE_URL" in your .env file')

    return AppConfig(
        database_url=database_url,
        sql_echo=_as_bool(environ.get("SQL_ECHO")),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        log_file=environ.get("LOG_FILE", "movie_catalog.log"),
        debug=_as_bool(environ.get("DEBUG")),
    )
