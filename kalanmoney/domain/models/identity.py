"""Identity primitives shared by entities and transactions."""

from dataclasses import dataclass
from typing import Protocol

from kalanmoney.domain.exceptions import DomainValidationError


class IdGenerator(Protocol):
    """Capability producing fresh, unique string identifiers."""

    def new_id(self) -> str:
        """Return an identifier never handed out before."""


def validate_identifier(value: str | None, label: str = "id") -> str:
    """Return the identifier or raise when it is blank.

    Args:
        value: Candidate identifier.
        label: Field name used in the error message.

    Returns:
        str: The identifier, unchanged.

    Raises:
        DomainValidationError: If the identifier is missing or blank.
    """
    if not isinstance(value, str) or not value.strip():
        raise DomainValidationError(f"{label} must be a non-empty string")
    return value


@dataclass(frozen=True)
class Entity:
    """Base class for aggregates identified by an opaque string ID.

    Concrete entities expose ``new`` (fresh ID from an ``IdGenerator``) and
    ``rehydrate`` (ID supplied by storage) factories.
    """

    id: str

    def __post_init__(self) -> None:
        validate_identifier(self.id)


__all__ = ["IdGenerator", "Entity", "validate_identifier"]
