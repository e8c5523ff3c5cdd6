"""Port for reading financial categories."""

from typing import Protocol

from kalanmoney.domain.models import FinancialCategory


class CategoryQueriesRepositoryPort(Protocol):
    """Port exposing read access to categories."""

    def get_category_by_id(
        self,
        category_id: str,
    ) -> FinancialCategory | None:
        """Return the category, or None when it does not exist."""


__all__ = ["CategoryQueriesRepositoryPort"]
