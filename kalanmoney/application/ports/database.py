"""Database port for KalanMoney storage adapters.

Infrastructure implementations provide the SQLAlchemy engine; repositories
depend on this protocol instead of configuration details.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the storage engine."""

    def get_engine(self) -> Engine:
        """Get the engine for the KalanMoney database.

        Returns:
            Engine: SQLAlchemy engine connected to the storage backend.
        """


__all__ = ["DatabaseEnginePort"]
