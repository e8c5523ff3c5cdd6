"""Port for persisting transactions against accounts and categories."""

from dataclasses import dataclass
from typing import Protocol

from kalanmoney.domain.models import Balance, Transaction


@dataclass(frozen=True)
class AddTransactionAccountModel:
    """Account projection carrying the balance after the transaction."""

    id: str
    balance: Balance


@dataclass(frozen=True)
class AddTransactionCategoryModel:
    """Category projection carrying the balance after the transaction."""

    id: str
    balance: Balance


class AccountCommandsRepositoryPort(Protocol):
    """Port exposing write access to account storage."""

    def add_transaction(
        self,
        account_model: AddTransactionAccountModel,
        transaction: Transaction,
        category_model: AddTransactionCategoryModel,
    ) -> None:
        """Persist the transaction and both balances in one atomic write.

        When this returns, the stored account and category both reflect the
        new balance and list the transaction. On failure neither does.
        """


__all__ = [
    "AddTransactionAccountModel",
    "AddTransactionCategoryModel",
    "AccountCommandsRepositoryPort",
]
