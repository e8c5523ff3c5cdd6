"""SQLAlchemy-backed repository writing accounts, categories and transactions."""

from sqlalchemy import text

from kalanmoney.application.exceptions import StorageError
from kalanmoney.application.ports.account_commands import (
    AccountCommandsRepositoryPort,
    AddTransactionAccountModel,
    AddTransactionCategoryModel,
)
from kalanmoney.application.ports.database import DatabaseEnginePort
from kalanmoney.domain.models import (
    FinancialAccount,
    FinancialCategory,
    Transaction,
)
from kalanmoney.infrastructure.logging.logger import get_app_logger
from kalanmoney.infrastructure.schema import transaction_params


INSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO financial_accounts (
        id, name, owner_sub_id, owner_name, balance, created_at
    )
    VALUES (
        :id, :name, :owner_sub_id, :owner_name, :balance, :created_at
    )
    """
)

INSERT_CATEGORY_SQL = text(
    """
    INSERT INTO financial_categories (
        id, name, account_id, owner_sub_id, owner_name, balance
    )
    VALUES (
        :id, :name, :account_id, :owner_sub_id, :owner_name, :balance
    )
    """
)

UPDATE_ACCOUNT_BALANCE_SQL = text(
    "UPDATE financial_accounts SET balance = :balance WHERE id = :id"
)

UPDATE_CATEGORY_BALANCE_SQL = text(
    "UPDATE financial_categories SET balance = :balance WHERE id = :id"
)

INSERT_ACCOUNT_TRANSACTION_SQL = text(
    """
    INSERT INTO account_transactions (id, account_id, amount, time_stamp)
    VALUES (:id, :account_id, :amount, :time_stamp)
    """
)

INSERT_CATEGORY_TRANSACTION_SQL = text(
    """
    INSERT INTO category_transactions (id, category_id, amount, time_stamp)
    VALUES (:id, :category_id, :amount, :time_stamp)
    """
)


class SqlAlchemyAccountCommandsRepository(AccountCommandsRepositoryPort):
    """Account writes backed by SQLAlchemy.

    Every public method runs inside a single ``engine.begin()`` block, so a
    failure part-way through rolls back all of its statements.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the storage engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def add_transaction(
        self,
        account_model: AddTransactionAccountModel,
        transaction: Transaction,
        category_model: AddTransactionCategoryModel,
    ) -> None:
        """Persist the transaction and both new balances atomically.

        Raises:
            StorageError: If the account or category row does not exist.
        """
        payload = transaction_params(transaction)
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            updated = conn.execute(
                UPDATE_ACCOUNT_BALANCE_SQL,
                {
                    "id": account_model.id,
                    "balance": str(account_model.balance.amount),
                },
            )
            if updated.rowcount != 1:
                raise StorageError(
                    f"Account {account_model.id} missing from storage"
                )
            conn.execute(
                INSERT_ACCOUNT_TRANSACTION_SQL,
                {**payload, "account_id": account_model.id},
            )
            updated = conn.execute(
                UPDATE_CATEGORY_BALANCE_SQL,
                {
                    "id": category_model.id,
                    "balance": str(category_model.balance.amount),
                },
            )
            if updated.rowcount != 1:
                raise StorageError(
                    f"Category {category_model.id} missing from storage"
                )
            conn.execute(
                INSERT_CATEGORY_TRANSACTION_SQL,
                {**payload, "category_id": category_model.id},
            )
        self._logger.debug(
            f"Stored transaction {transaction.id} for account "
            f"{account_model.id} and category {category_model.id}"
        )

    def create_account(self, account: FinancialAccount) -> None:
        """Insert a new account together with its existing transactions."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_ACCOUNT_SQL,
                {
                    "id": account.id,
                    "name": str(account.name),
                    "owner_sub_id": account.owner.subject_id,
                    "owner_name": account.owner.name,
                    "balance": str(account.balance.amount),
                    "created_at": account.created_at.to_iso(),
                },
            )
            if account.transactions:
                conn.execute(
                    INSERT_ACCOUNT_TRANSACTION_SQL,
                    [
                        {**transaction_params(tx), "account_id": account.id}
                        for tx in account.transactions
                    ],
                )
        self._logger.info(f"Created account {account.id}")

    def create_category(self, category: FinancialCategory) -> None:
        """Insert a new category together with its existing transactions."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_CATEGORY_SQL,
                {
                    "id": category.id,
                    "name": str(category.name),
                    "account_id": category.account_id,
                    "owner_sub_id": category.owner.subject_id,
                    "owner_name": category.owner.name,
                    "balance": str(category.balance.amount),
                },
            )
            if category.transactions:
                conn.execute(
                    INSERT_CATEGORY_TRANSACTION_SQL,
                    [
                        {**transaction_params(tx), "category_id": category.id}
                        for tx in category.transactions
                    ],
                )
        self._logger.info(f"Created category {category.id}")


__all__ = [
    "SqlAlchemyAccountCommandsRepository",
    "INSERT_ACCOUNT_SQL",
    "INSERT_CATEGORY_SQL",
    "UPDATE_ACCOUNT_BALANCE_SQL",
    "UPDATE_CATEGORY_BALANCE_SQL",
    "INSERT_ACCOUNT_TRANSACTION_SQL",
    "INSERT_CATEGORY_TRANSACTION_SQL",
]
