"""Database infrastructure for KalanMoney.

This module creates and reuses the SQLAlchemy engine connected to the
KalanMoney database. It belongs to the infrastructure layer because it deals
with external systems (SQLite or PostgreSQL).
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from kalanmoney.application.ports.database import DatabaseEnginePort
from kalanmoney.infrastructure.settings import KalanMoneySettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Server databases get a small connection pool with health checks. SQLite
    files keep the driver defaults and get their parent directory created.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the KalanMoney database.

    Returns:
        Engine: Lazily initialized engine built from KALANMONEY_DB_URL.
    """
    global _engine
    if _engine is None:
        settings = KalanMoneySettings.from_env()
        _engine = _create_engine(settings.database_url)
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy.

    The adapter hides configuration details (environment variables, pooling)
    behind the port. An explicit engine can be injected, which tests use to
    point repositories at an in-memory database.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine

    def get_engine(self) -> Engine:
        """Get the engine for the KalanMoney database.

        Returns:
            Engine: Injected engine, or the process-wide singleton.
        """
        if self._engine is not None:
            return self._engine
        return get_engine()


__all__ = ["get_engine", "SqlAlchemyDatabaseEngineAdapter"]
