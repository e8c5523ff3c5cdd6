"""Port for generating entity and transaction identifiers."""

from kalanmoney.domain.models.identity import IdGenerator

IdGeneratorPort = IdGenerator

__all__ = ["IdGeneratorPort"]
