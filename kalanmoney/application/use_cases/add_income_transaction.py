"""Use case recording money entering an account."""

from dataclasses import dataclass
from decimal import Decimal

from kalanmoney.application.use_cases.add_transaction import (
    AddTransactionOutput,
    AddTransactionRequest,
    AddTransactionUseCase,
)


@dataclass(frozen=True)
class AddIncomeTransactionOutput(AddTransactionOutput):
    """Result of a successful income transaction."""


class AddIncomeTransactionUseCase(AddTransactionUseCase):
    """Credit an account and one of its categories with ``abs(amount)``."""

    direction = "income"
    output_class = AddIncomeTransactionOutput

    def _signed_amount(self, amount: Decimal) -> Decimal:
        return abs(amount)


__all__ = [
    "AddIncomeTransactionUseCase",
    "AddIncomeTransactionOutput",
    "AddTransactionRequest",
]
