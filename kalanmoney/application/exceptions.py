"""Errors raised by application use cases and storage adapters."""

from kalanmoney.domain.exceptions import KalanMoneyError


class EntityNotFoundError(KalanMoneyError):
    """Raised when a referenced aggregate does not resolve."""

    entity_label = "Entity"

    def __init__(self, entity_id: str) -> None:
        super().__init__(f"{self.entity_label} '{entity_id}' not found")
        self.entity_id = entity_id


class AccountNotFoundError(EntityNotFoundError):
    """Raised when an account ID does not resolve."""

    entity_label = "Account"


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category ID does not resolve."""

    entity_label = "Category"


class StorageError(KalanMoneyError):
    """Raised by storage adapters when a write cannot be applied."""


__all__ = [
    "EntityNotFoundError",
    "AccountNotFoundError",
    "CategoryNotFoundError",
    "StorageError",
]
