"""SQLAlchemy-backed repository reading financial categories."""

from sqlalchemy import text

from kalanmoney.application.ports.category_queries import (
    CategoryQueriesRepositoryPort,
)
from kalanmoney.application.ports.database import DatabaseEnginePort
from kalanmoney.domain.models import AccountName, Balance, FinancialCategory
from kalanmoney.infrastructure.schema import (
    owner_from_row,
    transaction_from_row,
)


SELECT_CATEGORY_SQL = text(
    """
    SELECT id, name, account_id, owner_sub_id, owner_name, balance
    FROM financial_categories
    WHERE id = :category_id
    """
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT id, amount, time_stamp
    FROM category_transactions
    WHERE category_id = :category_id
    ORDER BY time_stamp, id
    """
)


class SqlAlchemyCategoryQueriesRepository(CategoryQueriesRepositoryPort):
    """Category reads backed by SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def get_category_by_id(
        self,
        category_id: str,
    ) -> FinancialCategory | None:
        """Return the category with its transactions, or None."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_CATEGORY_SQL,
                {"category_id": category_id},
            ).first()
            if row is None:
                return None
            tx_rows = conn.execute(
                SELECT_TRANSACTIONS_SQL,
                {"category_id": category_id},
            ).all()
        return FinancialCategory.rehydrate(
            category_id=row.id,
            name=AccountName.create(row.name),
            account_id=row.account_id,
            owner=owner_from_row(row),
            balance=Balance(row.balance),
            transactions=[transaction_from_row(r) for r in tx_rows],
        )


__all__ = ["SqlAlchemyCategoryQueriesRepository"]
