"""SQLAlchemy-backed repository reading financial accounts."""

from sqlalchemy import text

from kalanmoney.application.ports.account_queries import (
    AccountQueriesRepositoryPort,
)
from kalanmoney.application.ports.database import DatabaseEnginePort
from kalanmoney.domain.models import (
    AccountName,
    Balance,
    FinancialAccount,
    TimeStamp,
    Transaction,
    TransactionFilter,
)
from kalanmoney.infrastructure.schema import (
    owner_from_row,
    transaction_from_row,
)


SELECT_ACCOUNT_SQL = text(
    """
    SELECT id, name, owner_sub_id, owner_name, balance, created_at
    FROM financial_accounts
    WHERE id = :account_id
    """
)

SELECT_ACCOUNT_BY_OWNER_SQL = text(
    """
    SELECT id, name, owner_sub_id, owner_name, balance, created_at
    FROM financial_accounts
    WHERE owner_sub_id = :owner_id
    ORDER BY created_at, id
    LIMIT 1
    """
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, amount, time_stamp
    FROM account_transactions
    WHERE account_id = :account_id
    ORDER BY time_stamp, id
    """
)

SELECT_TRANSACTIONS_BETWEEN_SQL = text(
    """
    SELECT id, amount, time_stamp
    FROM account_transactions
    WHERE account_id = :account_id
      AND time_stamp >= :start
      AND time_stamp <= :end
    ORDER BY time_stamp, id
    """
)


class SqlAlchemyAccountQueriesRepository(AccountQueriesRepositoryPort):
    """Account reads backed by SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the storage engine.
        """
        self._db_port = db_port

    def get_account_by_id(self, account_id: str) -> FinancialAccount | None:
        """Return the account with every transaction, or None."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_ACCOUNT_SQL,
                {"account_id": account_id},
            ).first()
            if row is None:
                return None
            tx_rows = conn.execute(
                SELECT_TRANSACTIONS_SQL,
                {"account_id": account_id},
            ).all()
        return self._to_account(row, [transaction_from_row(r) for r in tx_rows])

    def get_account(
        self,
        account_id: str,
        transaction_filter: TransactionFilter,
    ) -> FinancialAccount | None:
        """Return the account with transactions inside the window, or None."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_ACCOUNT_SQL,
                {"account_id": account_id},
            ).first()
            if row is None:
                return None
            transactions = self._fetch_window(conn, row.id, transaction_filter)
        return self._to_account(row, transactions)

    def get_account_by_owner(
        self,
        owner_id: str,
        transaction_filter: TransactionFilter,
    ) -> FinancialAccount | None:
        """Return the oldest account of the owner, or None."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_ACCOUNT_BY_OWNER_SQL,
                {"owner_id": owner_id},
            ).first()
            if row is None:
                return None
            transactions = self._fetch_window(conn, row.id, transaction_filter)
        return self._to_account(row, transactions)

    @staticmethod
    def _fetch_window(
        conn,
        account_id: str,
        transaction_filter: TransactionFilter,
    ) -> list[Transaction]:
        rows = conn.execute(
            SELECT_TRANSACTIONS_BETWEEN_SQL,
            {
                "account_id": account_id,
                "start": transaction_filter.start.to_iso(),
                "end": transaction_filter.end.to_iso(),
            },
        ).all()
        return [transaction_from_row(row) for row in rows]

    @staticmethod
    def _to_account(row, transactions: list[Transaction]) -> FinancialAccount:
        return FinancialAccount.rehydrate(
            account_id=row.id,
            name=AccountName.create(row.name),
            owner=owner_from_row(row),
            balance=Balance(row.balance),
            created_at=TimeStamp.from_iso(row.created_at),
            transactions=transactions,
        )


__all__ = ["SqlAlchemyAccountQueriesRepository"]
