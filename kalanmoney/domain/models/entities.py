"""Aggregates holding identity, owner, balance and transaction history."""

from dataclasses import dataclass, field, replace
from typing import Iterable

from kalanmoney.domain.models.identity import (
    Entity,
    IdGenerator,
    validate_identifier,
)
from kalanmoney.domain.models.value_objects import (
    AccountName,
    Balance,
    Owner,
    TimeStamp,
    Transaction,
)


@dataclass(frozen=True)
class FinancialAccount(Entity):
    """Account owned by a single person.

    Attributes:
        name: Display name.
        owner: Account owner.
        balance: Current running total.
        created_at: Creation time.
        transactions: Transactions in the order they were applied.
    """

    name: AccountName
    owner: Owner
    balance: Balance
    created_at: TimeStamp
    transactions: tuple[Transaction, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "transactions", tuple(self.transactions))

    @classmethod
    def new(
        cls,
        id_generator: IdGenerator,
        name: AccountName,
        owner: Owner,
        balance: Balance | None = None,
    ) -> "FinancialAccount":
        """Create a brand new account with a generated ID."""
        return cls(
            id=id_generator.new_id(),
            name=name,
            owner=owner,
            balance=balance or Balance(),
            created_at=TimeStamp.create_now(),
        )

    @classmethod
    def rehydrate(
        cls,
        account_id: str,
        name: AccountName,
        owner: Owner,
        balance: Balance,
        created_at: TimeStamp,
        transactions: Iterable[Transaction] = (),
    ) -> "FinancialAccount":
        """Rebuild an account loaded from storage."""
        return cls(
            id=account_id,
            name=name,
            owner=owner,
            balance=balance,
            created_at=created_at,
            transactions=tuple(transactions),
        )

    def apply_transaction(self, transaction: Transaction) -> "FinancialAccount":
        """Return a copy with the transaction applied and recorded."""
        return replace(
            self,
            balance=self.balance.apply(transaction.amount),
            transactions=self.transactions + (transaction,),
        )


@dataclass(frozen=True)
class FinancialCategory(Entity):
    """Spending or income category, always the child of one account.

    The category balance is tracked in parallel with, and independently of,
    the parent account balance.
    """

    name: AccountName
    account_id: str
    owner: Owner
    balance: Balance
    transactions: tuple[Transaction, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        super().__post_init__()
        validate_identifier(self.account_id, "category account_id")
        object.__setattr__(self, "transactions", tuple(self.transactions))

    @classmethod
    def new(
        cls,
        id_generator: IdGenerator,
        name: AccountName,
        account: FinancialAccount,
        balance: Balance | None = None,
    ) -> "FinancialCategory":
        """Create a category under ``account`` with a generated ID."""
        return cls(
            id=id_generator.new_id(),
            name=name,
            account_id=account.id,
            owner=account.owner,
            balance=balance or Balance(),
        )

    @classmethod
    def rehydrate(
        cls,
        category_id: str,
        name: AccountName,
        account_id: str,
        owner: Owner,
        balance: Balance,
        transactions: Iterable[Transaction] = (),
    ) -> "FinancialCategory":
        """Rebuild a category loaded from storage."""
        return cls(
            id=category_id,
            name=name,
            account_id=account_id,
            owner=owner,
            balance=balance,
            transactions=tuple(transactions),
        )

    def belongs_to(self, account: FinancialAccount) -> bool:
        return self.account_id == account.id

    def apply_transaction(self, transaction: Transaction) -> "FinancialCategory":
        """Return a copy with the transaction applied and recorded."""
        return replace(
            self,
            balance=self.balance.apply(transaction.amount),
            transactions=self.transactions + (transaction,),
        )


__all__ = ["FinancialAccount", "FinancialCategory"]
