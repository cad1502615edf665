"""Relational database connection manager using SQLAlchemy."""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from models.catalog import Base

logger = logging.getLogger(__name__)


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the SQLAlchemy engine and hands out transactional sessions."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.engine: Engine = self._create_engine(database_url, echo)
        self.session_factory = sessionmaker(
            bind=self.engine, expire_on_commit=False
        )

    @staticmethod
    def _create_engine(database_url: str, echo: bool) -> Engine:
        if _is_memory_sqlite(database_url):
            # One shared connection, otherwise every session sees an empty db
            engine = create_engine(
                database_url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            engine = create_engine(database_url, echo=echo, pool_pre_ping=True)

        if engine.dialect.name == "sqlite":
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    @retry(
        retry=retry_if_exception_type(OperationalError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        reraise=True,
    )
    def connect(self) -> None:
        """Check the store is reachable, retrying transient failures."""
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except OperationalError as e:
            logger.warning(f"Database not reachable yet: {e}")
            raise
        logger.info(f"Connected to {self.engine.dialect.name} database")

    def create_schema(self) -> None:
        """Create missing tables."""
        Base.metadata.create_all(self.engine)
        logger.info("Database schema is up to date")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session wrapped in a transaction."""
        with self.session_factory() as session:
            with session.begin():
                yield session

    def dispose(self) -> None:
        """Release every pooled connection."""
        self.engine.dispose()
        logger.info("Database connection closed")
