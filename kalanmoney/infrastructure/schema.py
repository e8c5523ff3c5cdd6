"""Table definitions and row mapping shared by the SQLAlchemy repositories.

Amounts and balances are stored as text so that SQLite keeps their exact
decimal value. Timestamps are stored as ISO-8601 UTC strings with
microseconds, which sort chronologically as text.
"""

from kalanmoney.application.ports.database import DatabaseEnginePort
from kalanmoney.domain.models import Owner, TimeStamp, Transaction
from kalanmoney.utils.decimal_utils import coerce_decimal


CREATE_TABLES_SQL = (
    """
    CREATE TABLE IF NOT EXISTS financial_accounts (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        owner_sub_id TEXT NOT NULL,
        owner_name TEXT NOT NULL,
        balance TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS financial_categories (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        account_id TEXT NOT NULL REFERENCES financial_accounts (id),
        owner_sub_id TEXT NOT NULL,
        owner_name TEXT NOT NULL,
        balance TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS account_transactions (
        id TEXT NOT NULL,
        account_id TEXT NOT NULL REFERENCES financial_accounts (id),
        amount TEXT NOT NULL,
        time_stamp TEXT NOT NULL,
        PRIMARY KEY (account_id, id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS category_transactions (
        id TEXT NOT NULL,
        category_id TEXT NOT NULL REFERENCES financial_categories (id),
        amount TEXT NOT NULL,
        time_stamp TEXT NOT NULL,
        PRIMARY KEY (category_id, id)
    )
    """,
)


def ensure_schema(db_port: DatabaseEnginePort) -> None:
    """Create the KalanMoney tables if they do not exist.

    Args:
        db_port: Port providing access to the storage engine.
    """
    engine = db_port.get_engine()
    with engine.begin() as conn:
        for statement in CREATE_TABLES_SQL:
            conn.exec_driver_sql(statement)


def owner_from_row(row) -> Owner:
    return Owner(subject_id=row.owner_sub_id, name=row.owner_name)


def transaction_from_row(row) -> Transaction:
    return Transaction(
        id=row.id,
        amount=coerce_decimal(row.amount),
        time_stamp=TimeStamp.from_iso(row.time_stamp),
    )


def transaction_params(transaction: Transaction) -> dict[str, str]:
    return {
        "id": transaction.id,
        "amount": str(transaction.amount),
        "time_stamp": transaction.time_stamp.to_iso(),
    }


__all__ = [
    "CREATE_TABLES_SQL",
    "ensure_schema",
    "owner_from_row",
    "transaction_from_row",
    "transaction_params",
]
