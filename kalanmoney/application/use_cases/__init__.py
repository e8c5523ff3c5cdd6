"""Application use cases package."""

from .add_income_transaction import (
    AddIncomeTransactionOutput,
    AddIncomeTransactionUseCase,
)
from .add_outcome_transaction import (
    AddOutcomeTransactionOutput,
    AddOutcomeTransactionUseCase,
)
from .add_transaction import (
    AddTransactionOutput,
    AddTransactionRequest,
    AddTransactionUseCase,
)
from .get_account_summary import AccountSummary, GetAccountSummaryUseCase

__all__ = [
    "AddIncomeTransactionOutput",
    "AddIncomeTransactionUseCase",
    "AddOutcomeTransactionOutput",
    "AddOutcomeTransactionUseCase",
    "AddTransactionOutput",
    "AddTransactionRequest",
    "AddTransactionUseCase",
    "AccountSummary",
    "GetAccountSummaryUseCase",
]
