"""Application ports package."""

from .account_commands import (
    AccountCommandsRepositoryPort,
    AddTransactionAccountModel,
    AddTransactionCategoryModel,
)
from .account_queries import AccountQueriesRepositoryPort
from .category_queries import CategoryQueriesRepositoryPort
from .database import DatabaseEnginePort
from .id_generator import IdGeneratorPort

__all__ = [
    "AccountCommandsRepositoryPort",
    "AddTransactionAccountModel",
    "AddTransactionCategoryModel",
    "AccountQueriesRepositoryPort",
    "CategoryQueriesRepositoryPort",
    "DatabaseEnginePort",
    "IdGeneratorPort",
]
