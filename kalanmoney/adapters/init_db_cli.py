"""CLI adapter creating the KalanMoney tables."""

from kalanmoney.infrastructure.container import build_database_adapter
from kalanmoney.infrastructure.logging.logger import get_app_logger
from kalanmoney.infrastructure.schema import ensure_schema


def main() -> None:
    """Create the storage tables when they are missing."""
    logger = get_app_logger()
    db_adapter = build_database_adapter()
    ensure_schema(db_adapter)
    logger.info("KalanMoney schema is ready")
    print("KalanMoney database initialized.")


if __name__ == "__main__":  # pragma: no cover
    main()
