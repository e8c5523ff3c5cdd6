"""Composition root for wiring infrastructure adapters."""

from kalanmoney.application.ports.account_commands import (
    AccountCommandsRepositoryPort,
)
from kalanmoney.application.ports.account_queries import (
    AccountQueriesRepositoryPort,
)
from kalanmoney.application.ports.category_queries import (
    CategoryQueriesRepositoryPort,
)
from kalanmoney.application.ports.database import DatabaseEnginePort
from kalanmoney.application.ports.id_generator import IdGeneratorPort
from kalanmoney.application.use_cases.add_income_transaction import (
    AddIncomeTransactionUseCase,
)
from kalanmoney.application.use_cases.add_outcome_transaction import (
    AddOutcomeTransactionUseCase,
)
from kalanmoney.application.use_cases.get_account_summary import (
    GetAccountSummaryUseCase,
)
from kalanmoney.infrastructure.account_commands_repository import (
    SqlAlchemyAccountCommandsRepository,
)
from kalanmoney.infrastructure.account_queries_repository import (
    SqlAlchemyAccountQueriesRepository,
)
from kalanmoney.infrastructure.category_queries_repository import (
    SqlAlchemyCategoryQueriesRepository,
)
from kalanmoney.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from kalanmoney.infrastructure.id_generator import Uuid4IdGenerator
from kalanmoney.infrastructure.logging.logger import get_app_logger


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_id_generator() -> IdGeneratorPort:
    """Return the identifier generator."""
    return Uuid4IdGenerator()


def build_account_queries_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountQueriesRepositoryPort:
    """Return the account queries repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountQueriesRepository(resolved_db)


def build_category_queries_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CategoryQueriesRepositoryPort:
    """Return the category queries repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCategoryQueriesRepository(resolved_db)


def build_account_commands_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountCommandsRepositoryPort:
    """Return the account commands repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountCommandsRepository(
        resolved_db,
        logger=get_app_logger(),
    )


def build_add_outcome_transaction_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> AddOutcomeTransactionUseCase:
    """Return the outcome use case wired to SQLAlchemy repositories."""
    resolved_db = db_port or build_database_adapter()
    return AddOutcomeTransactionUseCase(
        account_queries=build_account_queries_repository(resolved_db),
        category_queries=build_category_queries_repository(resolved_db),
        account_commands=build_account_commands_repository(resolved_db),
        id_generator=build_id_generator(),
        logger=get_app_logger(),
    )


def build_add_income_transaction_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> AddIncomeTransactionUseCase:
    """Return the income use case wired to SQLAlchemy repositories."""
    resolved_db = db_port or build_database_adapter()
    return AddIncomeTransactionUseCase(
        account_queries=build_account_queries_repository(resolved_db),
        category_queries=build_category_queries_repository(resolved_db),
        account_commands=build_account_commands_repository(resolved_db),
        id_generator=build_id_generator(),
        logger=get_app_logger(),
    )


def build_get_account_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetAccountSummaryUseCase:
    """Return the account summary use case."""
    resolved_db = db_port or build_database_adapter()
    return GetAccountSummaryUseCase(
        account_queries=build_account_queries_repository(resolved_db),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_id_generator",
    "build_account_queries_repository",
    "build_category_queries_repository",
    "build_account_commands_repository",
    "build_add_outcome_transaction_use_case",
    "build_add_income_transaction_use_case",
    "build_get_account_summary_use_case",
]
