"""Use case recording money leaving an account."""

from dataclasses import dataclass
from decimal import Decimal

from kalanmoney.application.use_cases.add_transaction import (
    AddTransactionOutput,
    AddTransactionRequest,
    AddTransactionUseCase,
)


@dataclass(frozen=True)
class AddOutcomeTransactionOutput(AddTransactionOutput):
    """Result of a successful outcome transaction."""


class AddOutcomeTransactionUseCase(AddTransactionUseCase):
    """Debit an account and one of its categories.

    Whatever sign the caller uses, the amount is always stored as a debit:
    ``-abs(amount)``.
    """

    direction = "outcome"
    output_class = AddOutcomeTransactionOutput

    def _signed_amount(self, amount: Decimal) -> Decimal:
        return -abs(amount)


__all__ = [
    "AddOutcomeTransactionUseCase",
    "AddOutcomeTransactionOutput",
    "AddTransactionRequest",
]
