"""Use case summarizing an account over a date window."""

from dataclasses import dataclass
from decimal import Decimal

from kalanmoney.application.exceptions import AccountNotFoundError
from kalanmoney.application.ports.account_queries import (
    AccountQueriesRepositoryPort,
)
from kalanmoney.domain.models import (
    FinancialAccount,
    Transaction,
    TransactionFilter,
)
from kalanmoney.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AccountSummary:
    """Account balance with the transactions of a window.

    Attributes:
        account_id: Account identifier.
        name: Account display name.
        balance: Current account balance, independent of the window.
        income_total: Sum of positive amounts inside the window.
        outcome_total: Sum of negative amounts inside the window (<= 0).
        transactions: Transactions inside the window, oldest first.
    """

    account_id: str
    name: str
    balance: Decimal
    income_total: Decimal
    outcome_total: Decimal
    transactions: tuple[Transaction, ...]

    @property
    def net_total(self) -> Decimal:
        """Return income_total plus outcome_total."""
        return self.income_total + self.outcome_total


class GetAccountSummaryUseCase:
    """Read an account and total its transactions for a date window."""

    def __init__(
        self,
        account_queries: AccountQueriesRepositoryPort,
        logger=None,
    ) -> None:
        self._account_queries = account_queries
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account_id: str,
        transaction_filter: TransactionFilter,
    ) -> AccountSummary:
        """Return the summary of ``account_id`` for the filter window.

        Raises:
            AccountNotFoundError: If the account does not exist.
        """
        account = self._account_queries.get_account(
            account_id,
            transaction_filter,
        )
        if account is None:
            raise AccountNotFoundError(account_id)
        return self._summarize(account, transaction_filter)

    def execute_for_owner(
        self,
        owner_id: str,
        transaction_filter: TransactionFilter,
    ) -> AccountSummary:
        """Return the summary of the account owned by ``owner_id``.

        Raises:
            AccountNotFoundError: If the owner has no account.
        """
        account = self._account_queries.get_account_by_owner(
            owner_id,
            transaction_filter,
        )
        if account is None:
            raise AccountNotFoundError(f"owner:{owner_id}")
        return self._summarize(account, transaction_filter)

    def _summarize(
        self,
        account: FinancialAccount,
        transaction_filter: TransactionFilter,
    ) -> AccountSummary:
        transactions = tuple(
            sorted(
                (
                    tx
                    for tx in account.transactions
                    if transaction_filter.contains(tx.time_stamp)
                ),
                key=lambda tx: tx.time_stamp,
            )
        )
        income_total = sum(
            (tx.amount for tx in transactions if tx.is_income),
            Decimal("0"),
        )
        outcome_total = sum(
            (tx.amount for tx in transactions if tx.is_outcome),
            Decimal("0"),
        )
        self._logger.info(
            f"Summarized {len(transactions)} transactions for account "
            f"{account.id} between {transaction_filter.from_date} and "
            f"{transaction_filter.to_date}"
        )
        return AccountSummary(
            account_id=account.id,
            name=str(account.name),
            balance=account.balance.amount,
            income_total=income_total,
            outcome_total=outcome_total,
            transactions=transactions,
        )


__all__ = ["GetAccountSummaryUseCase", "AccountSummary"]
