"""Shared pipeline for use cases applying a transaction to an account.

Each run loads the account and category, checks they exist, builds a
transaction with a normalized signed amount, computes both new
balances and hands everything to the command repository in one call.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from kalanmoney.application.exceptions import (
    AccountNotFoundError,
    CategoryNotFoundError,
)
from kalanmoney.application.ports.account_commands import (
    AccountCommandsRepositoryPort,
    AddTransactionAccountModel,
    AddTransactionCategoryModel,
)
from kalanmoney.application.ports.account_queries import (
    AccountQueriesRepositoryPort,
)
from kalanmoney.application.ports.category_queries import (
    CategoryQueriesRepositoryPort,
)
from kalanmoney.application.ports.id_generator import IdGeneratorPort
from kalanmoney.domain.exceptions import DomainValidationError
from kalanmoney.domain.models import (
    Balance,
    FinancialAccount,
    FinancialCategory,
    Transaction,
)
from kalanmoney.infrastructure.logging.logger import get_app_logger
from kalanmoney.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class AddTransactionRequest:
    """Input of the add-transaction use cases.

    Attributes:
        account_id: Account receiving the transaction.
        category_id: Category under that account.
        amount: Amount as entered by the caller; its sign is ignored.
    """

    account_id: str
    category_id: str
    amount: Decimal

    def __post_init__(self) -> None:
        try:
            amount = coerce_decimal(self.amount)
        except ValueError as exc:
            raise DomainValidationError(str(exc)) from exc
        object.__setattr__(self, "amount", amount)


@dataclass(frozen=True)
class AddTransactionOutput:
    """Result of a successful add-transaction run.

    Attributes:
        transaction_id: ID of the persisted transaction.
        account_balance: Account balance after the transaction.
        category_balance: Category balance after the transaction.
    """

    transaction_id: str
    account_balance: Decimal
    category_balance: Decimal


class AddTransactionUseCase(ABC):
    """Base use case; subclasses decide the sign of the amount."""

    direction = "transaction"
    output_class = AddTransactionOutput

    def __init__(
        self,
        account_queries: AccountQueriesRepositoryPort,
        category_queries: CategoryQueriesRepositoryPort,
        account_commands: AccountCommandsRepositoryPort,
        id_generator: IdGeneratorPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            account_queries: Port used to load the account.
            category_queries: Port used to load the category.
            account_commands: Port persisting the transaction.
            id_generator: Capability producing transaction IDs.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._account_queries = account_queries
        self._category_queries = category_queries
        self._account_commands = account_commands
        self._id_generator = id_generator
        self._logger = logger or get_app_logger()

    def execute(self, request: AddTransactionRequest) -> AddTransactionOutput:
        """Apply the transaction described by ``request``.

        Args:
            request: Account, category and raw amount.

        Returns:
            AddTransactionOutput: New transaction ID and balances.

        Raises:
            AccountNotFoundError: If the account does not exist.
            CategoryNotFoundError: If the category does not exist.
        """
        signed_amount = self._signed_amount(request.amount)
        account = self._load_account(request.account_id)
        category = self._load_category(request.category_id, account)

        transaction = Transaction.create(signed_amount, self._id_generator)
        account_balance = account.balance.apply(signed_amount)
        category_balance = category.balance.apply(signed_amount)

        self._account_commands.add_transaction(
            AddTransactionAccountModel(id=account.id, balance=account_balance),
            transaction,
            AddTransactionCategoryModel(
                id=category.id,
                balance=category_balance,
            ),
        )
        self._logger.info(
            f"Added {self.direction} {transaction.id} of {signed_amount} "
            f"to account {account.id} (balance {account_balance.amount})"
        )
        return self._build_output(transaction, account_balance, category_balance)

    @abstractmethod
    def _signed_amount(self, amount: Decimal) -> Decimal:
        """Return the amount with the sign of this transaction kind."""

    def _build_output(
        self,
        transaction: Transaction,
        account_balance: Balance,
        category_balance: Balance,
    ) -> AddTransactionOutput:
        return self.output_class(
            transaction_id=transaction.id,
            account_balance=account_balance.amount,
            category_balance=category_balance.amount,
        )

    def _load_account(self, account_id: str) -> FinancialAccount:
        account = self._account_queries.get_account_by_id(account_id)
        if account is None:
            self._logger.warning(f"Account {account_id} not found")
            raise AccountNotFoundError(account_id)
        return account

    def _load_category(
        self,
        category_id: str,
        account: FinancialAccount,
    ) -> FinancialCategory:
        category = self._category_queries.get_category_by_id(category_id)
        if category is None:
            self._logger.warning(f"Category {category_id} not found")
            raise CategoryNotFoundError(category_id)
        if not category.belongs_to(account):
            self._logger.warning(
                f"Category {category_id} belongs to account "
                f"{category.account_id}, not {account.id}; applying anyway"
            )
        return category


__all__ = [
    "AddTransactionRequest",
    "AddTransactionOutput",
    "AddTransactionUseCase",
]
