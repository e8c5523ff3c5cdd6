"""Tests for the SQLAlchemy repositories against in-memory SQLite."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from kalanmoney.application.exceptions import StorageError
from kalanmoney.application.ports.account_commands import (
    AddTransactionAccountModel,
    AddTransactionCategoryModel,
)
from kalanmoney.application.use_cases.add_outcome_transaction import (
    AddOutcomeTransactionUseCase,
)
from kalanmoney.application.use_cases.add_transaction import (
    AddTransactionRequest,
)
from kalanmoney.domain.models import (
    AccountName,
    Balance,
    FinancialAccount,
    FinancialCategory,
    Owner,
    TimeStamp,
    Transaction,
    TransactionFilter,
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
from kalanmoney.infrastructure.schema import ensure_schema


def _stamp(month: int, day: int) -> TimeStamp:
    return TimeStamp(datetime(2024, month, day, 10, 0, tzinfo=timezone.utc))


@pytest.fixture
def db_port() -> SqlAlchemyDatabaseEngineAdapter:
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    adapter = SqlAlchemyDatabaseEngineAdapter(engine)
    ensure_schema(adapter)
    return adapter


@pytest.fixture
def seeded(db_port):
    owner = Owner(subject_id="sub-1", name="Test")
    account = FinancialAccount.rehydrate(
        account_id="account-1",
        name=AccountName.create("Main"),
        owner=owner,
        balance=Balance(Decimal("100.00")),
        created_at=_stamp(1, 1),
        transactions=[
            Transaction(id="t1", amount=Decimal("120.00"), time_stamp=_stamp(1, 2)),
            Transaction(id="t2", amount=Decimal("-20.00"), time_stamp=_stamp(2, 3)),
        ],
    )
    category = FinancialCategory.rehydrate(
        category_id="category-1",
        name=AccountName.create("Food"),
        account_id=account.id,
        owner=owner,
        balance=Balance(Decimal("100.00")),
        transactions=[
            Transaction(id="t1", amount=Decimal("100.00"), time_stamp=_stamp(1, 2)),
        ],
    )
    commands = SqlAlchemyAccountCommandsRepository(db_port, logger=MagicMock())
    commands.create_account(account)
    commands.create_category(category)
    return account, category


def test_get_account_by_id_rehydrates_full_history(db_port, seeded) -> None:
    account, _ = seeded
    repository = SqlAlchemyAccountQueriesRepository(db_port)

    loaded = repository.get_account_by_id(account.id)

    assert loaded == account


def test_get_account_by_id_returns_none_when_missing(db_port) -> None:
    repository = SqlAlchemyAccountQueriesRepository(db_port)

    assert repository.get_account_by_id("missing") is None


def test_get_account_limits_transactions_to_window(db_port, seeded) -> None:
    account, _ = seeded
    repository = SqlAlchemyAccountQueriesRepository(db_port)

    loaded = repository.get_account(
        account.id,
        TransactionFilter.for_month(2, 2024),
    )

    assert [tx.id for tx in loaded.transactions] == ["t2"]
    assert loaded.balance == Balance(Decimal("100.00"))


def test_get_account_by_owner(db_port, seeded) -> None:
    account, _ = seeded
    repository = SqlAlchemyAccountQueriesRepository(db_port)

    loaded = repository.get_account_by_owner(
        "sub-1",
        TransactionFilter.for_month(1, 2024),
    )

    assert loaded.id == account.id
    assert [tx.id for tx in loaded.transactions] == ["t1"]
    assert (
        repository.get_account_by_owner(
            "nobody",
            TransactionFilter.for_month(1, 2024),
        )
        is None
    )


def test_get_category_by_id(db_port, seeded) -> None:
    _, category = seeded
    repository = SqlAlchemyCategoryQueriesRepository(db_port)

    assert repository.get_category_by_id(category.id) == category
    assert repository.get_category_by_id("missing") is None


def test_add_transaction_writes_account_and_category(db_port, seeded) -> None:
    account, category = seeded
    commands = SqlAlchemyAccountCommandsRepository(db_port, logger=MagicMock())
    transaction = Transaction(
        id="t3",
        amount=Decimal("-10.0"),
        time_stamp=_stamp(3, 1),
    )

    commands.add_transaction(
        AddTransactionAccountModel(id=account.id, balance=Balance("90.00")),
        transaction,
        AddTransactionCategoryModel(id=category.id, balance=Balance("90.00")),
    )

    stored_account = SqlAlchemyAccountQueriesRepository(
        db_port
    ).get_account_by_id(account.id)
    stored_category = SqlAlchemyCategoryQueriesRepository(
        db_port
    ).get_category_by_id(category.id)
    assert stored_account.balance.amount == Decimal("90.00")
    assert stored_account.transactions[-1] == transaction
    assert stored_category.balance.amount == Decimal("90.00")
    assert stored_category.transactions[-1] == transaction


def test_add_transaction_is_atomic_when_category_missing(
    db_port,
    seeded,
) -> None:
    """A failed category write leaves the account untouched."""
    account, _ = seeded
    commands = SqlAlchemyAccountCommandsRepository(db_port, logger=MagicMock())

    with pytest.raises(StorageError):
        commands.add_transaction(
            AddTransactionAccountModel(id=account.id, balance=Balance("1")),
            Transaction(
                id="t3",
                amount=Decimal("-99.00"),
                time_stamp=_stamp(3, 1),
            ),
            AddTransactionCategoryModel(id="missing", balance=Balance("1")),
        )

    stored = SqlAlchemyAccountQueriesRepository(db_port).get_account_by_id(
        account.id
    )
    assert stored.balance.amount == Decimal("100.00")
    assert [tx.id for tx in stored.transactions] == ["t1", "t2"]


def test_outcome_use_case_end_to_end(db_port, seeded) -> None:
    account, category = seeded
    use_case = AddOutcomeTransactionUseCase(
        account_queries=SqlAlchemyAccountQueriesRepository(db_port),
        category_queries=SqlAlchemyCategoryQueriesRepository(db_port),
        account_commands=SqlAlchemyAccountCommandsRepository(
            db_port,
            logger=MagicMock(),
        ),
        id_generator=Uuid4IdGenerator(),
        logger=MagicMock(),
    )

    result = use_case.execute(
        AddTransactionRequest(account.id, category.id, Decimal("-10.0"))
    )

    assert result.account_balance == Decimal("90.00")
    engine = db_port.get_engine()
    with engine.connect() as conn:
        row = conn.execute(
            text(
                "SELECT amount FROM account_transactions "
                "WHERE id = :id AND account_id = :account_id"
            ),
            {"id": result.transaction_id, "account_id": account.id},
        ).one()
    assert Decimal(row.amount) == Decimal("-10.0")


def test_ensure_schema_is_idempotent(db_port) -> None:
    ensure_schema(db_port)
    ensure_schema(db_port)
