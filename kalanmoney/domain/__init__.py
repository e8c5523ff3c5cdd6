"""Domain package for business rules and core models."""

from .exceptions import DomainValidationError, KalanMoneyError
from .models import (
    AccountName,
    Balance,
    Entity,
    FinancialAccount,
    FinancialCategory,
    IdGenerator,
    Owner,
    TimeStamp,
    Transaction,
    TransactionFilter,
)
from .policies import is_valid_display_name, normalize_display_name

__all__ = [
    "KalanMoneyError",
    "DomainValidationError",
    "AccountName",
    "Balance",
    "Entity",
    "FinancialAccount",
    "FinancialCategory",
    "IdGenerator",
    "Owner",
    "TimeStamp",
    "Transaction",
    "TransactionFilter",
    "is_valid_display_name",
    "normalize_display_name",
]
