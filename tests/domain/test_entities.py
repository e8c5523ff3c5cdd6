"""Tests for account and category entities."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from kalanmoney.domain.exceptions import DomainValidationError
from kalanmoney.domain.models import (
    AccountName,
    Balance,
    FinancialAccount,
    FinancialCategory,
    Owner,
    TimeStamp,
    Transaction,
)


class SequentialIdGenerator:
    """Deterministic generator returning id-1, id-2, ..."""

    def __init__(self) -> None:
        self._counter = 0

    def new_id(self) -> str:
        self._counter += 1
        return f"id-{self._counter}"


def _owner() -> Owner:
    return Owner(subject_id="sub-1", name="Test")


def test_new_account_takes_generated_id() -> None:
    account = FinancialAccount.new(
        SequentialIdGenerator(),
        AccountName.create("Main"),
        _owner(),
    )

    assert account.id == "id-1"
    assert account.balance == Balance(Decimal("0"))
    assert account.transactions == ()


def test_rehydrated_account_keeps_supplied_id() -> None:
    created_at = TimeStamp.create_now()
    account = FinancialAccount.rehydrate(
        account_id="stored-id",
        name=AccountName.create("Main"),
        owner=_owner(),
        balance=Balance(Decimal("100.00")),
        created_at=created_at,
        transactions=[
            Transaction(
                id="t-0",
                amount=Decimal("100.00"),
                time_stamp=created_at,
            )
        ],
    )

    assert account.id == "stored-id"
    assert isinstance(account.transactions, tuple)
    assert len(account.transactions) == 1


def test_entity_rejects_empty_id() -> None:
    with pytest.raises(DomainValidationError):
        FinancialAccount.rehydrate(
            account_id="",
            name=AccountName.create("Main"),
            owner=_owner(),
            balance=Balance(),
            created_at=TimeStamp.create_now(),
        )


def test_entity_id_is_immutable() -> None:
    account = FinancialAccount.new(
        SequentialIdGenerator(),
        AccountName.create("Main"),
        _owner(),
    )

    with pytest.raises(FrozenInstanceError):
        account.id = "other"


def test_account_apply_transaction_updates_balance_and_history() -> None:
    """Balance after applying a equals balance before plus a."""
    generator = SequentialIdGenerator()
    account = FinancialAccount.new(
        generator,
        AccountName.create("Main"),
        _owner(),
        Balance(Decimal("100.00")),
    )
    transaction = Transaction.create(Decimal("-10.0"), generator)

    updated = account.apply_transaction(transaction)

    assert updated.balance == Balance(Decimal("90.00"))
    assert updated.transactions[-1] == transaction
    assert updated.id == account.id
    assert account.balance == Balance(Decimal("100.00"))


def test_new_category_is_child_of_account() -> None:
    generator = SequentialIdGenerator()
    account = FinancialAccount.new(
        generator,
        AccountName.create("Main"),
        _owner(),
    )
    category = FinancialCategory.new(
        generator,
        AccountName.create("Food"),
        account,
    )

    assert category.account_id == account.id
    assert category.owner == account.owner
    assert category.belongs_to(account)


def test_category_apply_transaction_is_independent_of_account() -> None:
    generator = SequentialIdGenerator()
    category = FinancialCategory.rehydrate(
        category_id="cat-1",
        name=AccountName.create("Food"),
        account_id="acc-1",
        owner=_owner(),
        balance=Balance(Decimal("3.50")),
    )
    transaction = Transaction.create(Decimal("-1.25"), generator)

    updated = category.apply_transaction(transaction)

    assert updated.balance.amount == Decimal("2.25")
    assert updated.transactions == (transaction,)


def test_category_requires_parent_account() -> None:
    with pytest.raises(DomainValidationError):
        FinancialCategory.rehydrate(
            category_id="cat-1",
            name=AccountName.create("Food"),
            account_id="",
            owner=_owner(),
            balance=Balance(),
        )
