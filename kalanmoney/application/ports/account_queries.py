"""Port for reading financial accounts."""

from typing import Protocol

from kalanmoney.domain.models import FinancialAccount, TransactionFilter


class AccountQueriesRepositoryPort(Protocol):
    """Port exposing read access to accounts.

    Lookups return ``None`` when nothing matches; they never raise for a
    missing account.
    """

    def get_account_by_id(self, account_id: str) -> FinancialAccount | None:
        """Return the account with its full transaction history."""

    def get_account(
        self,
        account_id: str,
        transaction_filter: TransactionFilter,
    ) -> FinancialAccount | None:
        """Return the account with transactions inside the filter window."""

    def get_account_by_owner(
        self,
        owner_id: str,
        transaction_filter: TransactionFilter,
    ) -> FinancialAccount | None:
        """Return the first account owned by ``owner_id``."""


__all__ = ["AccountQueriesRepositoryPort"]
