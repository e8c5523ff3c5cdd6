"""Domain models package."""

from .entities import FinancialAccount, FinancialCategory
from .identity import Entity, IdGenerator
from .value_objects import (
    AccountName,
    Balance,
    Owner,
    TimeStamp,
    Transaction,
    TransactionFilter,
)

__all__ = [
    "Entity",
    "IdGenerator",
    "FinancialAccount",
    "FinancialCategory",
    "AccountName",
    "Balance",
    "Owner",
    "TimeStamp",
    "Transaction",
    "TransactionFilter",
]
