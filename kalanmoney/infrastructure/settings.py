"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from kalanmoney.utils.utils import get_project_root


def _default_database_url() -> str:
    path = get_project_root() / "data" / "kalanmoney.db"
    return f"sqlite:///{path}"


@dataclass(frozen=True)
class KalanMoneySettings:
    """Settings for the storage backend.

    Attributes:
        database_url: SQLAlchemy URL of the KalanMoney database.
    """

    database_url: str

    @classmethod
    def from_env(cls) -> "KalanMoneySettings":
        """Build settings from environment variables and a local .env file.

        Returns:
            KalanMoneySettings: Settings sourced from the environment.
        """
        dotenv.load_dotenv()
        raw_url = os.getenv("KALANMONEY_DB_URL", "").strip()
        return cls(database_url=raw_url or _default_database_url())

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


__all__ = ["KalanMoneySettings"]
