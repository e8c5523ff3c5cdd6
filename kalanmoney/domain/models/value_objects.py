"""Immutable, self-validating value objects."""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from decimal import Decimal

from kalanmoney.domain.exceptions import DomainValidationError
from kalanmoney.domain.models.identity import IdGenerator, validate_identifier
from kalanmoney.domain.policies.names import (
    is_valid_display_name,
    normalize_display_name,
)
from kalanmoney.utils.decimal_utils import coerce_decimal


def _to_decimal(value, label: str) -> Decimal:
    try:
        return coerce_decimal(value)
    except ValueError as exc:
        raise DomainValidationError(f"{label}: {exc}") from exc


@dataclass(frozen=True)
class Balance:
    """Running total of an account or category.

    Attributes:
        amount: Exact signed amount; negative balances are allowed.
    """

    amount: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _to_decimal(self.amount, "balance"))

    def apply(self, amount) -> "Balance":
        """Return a new balance with ``amount`` added.

        Args:
            amount: Signed amount to add.

        Returns:
            Balance: Updated balance. Overdraft is never rejected.
        """
        return Balance(self.amount + _to_decimal(amount, "amount"))


@dataclass(frozen=True)
class AccountName:
    """Validated display name for accounts and categories."""

    value: str

    def __post_init__(self) -> None:
        if not is_valid_display_name(self.value):
            raise DomainValidationError("name must not be empty")
        object.__setattr__(self, "value", normalize_display_name(self.value))

    @classmethod
    def create(cls, value: str) -> "AccountName":
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Owner:
    """Person owning an account.

    Attributes:
        subject_id: Subject identifier issued by the identity provider.
        name: Display name.
    """

    subject_id: str
    name: str

    def __post_init__(self) -> None:
        validate_identifier(self.subject_id, "owner subject_id")


@dataclass(frozen=True, order=True)
class TimeStamp:
    """Timezone-aware point in time, normalized to UTC."""

    value: datetime

    def __post_init__(self) -> None:
        value = self.value
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        object.__setattr__(self, "value", value.astimezone(timezone.utc))

    @classmethod
    def create_now(cls) -> "TimeStamp":
        return cls(datetime.now(tz=timezone.utc))

    @classmethod
    def from_iso(cls, raw: str) -> "TimeStamp":
        return cls(datetime.fromisoformat(raw))

    def to_iso(self) -> str:
        return self.value.isoformat(timespec="microseconds")


@dataclass(frozen=True)
class TransactionFilter:
    """Inclusive date window used by account queries.

    Attributes:
        from_date: First day included.
        to_date: Last day included.
    """

    from_date: date
    to_date: date

    def __post_init__(self) -> None:
        if self.from_date > self.to_date:
            raise DomainValidationError(
                f"from_date {self.from_date} is after to_date {self.to_date}"
            )

    @classmethod
    def for_month(cls, month: int, year: int) -> "TransactionFilter":
        """Return the filter covering a whole calendar month.

        Raises:
            DomainValidationError: If month is outside 1..12.
        """
        if not 1 <= month <= 12:
            raise DomainValidationError(f"Invalid month: {month}")
        last_day = calendar.monthrange(year, month)[1]
        return cls(
            from_date=date(year, month, 1),
            to_date=date(year, month, last_day),
        )

    @property
    def start(self) -> TimeStamp:
        return TimeStamp(datetime.combine(self.from_date, time.min, timezone.utc))

    @property
    def end(self) -> TimeStamp:
        return TimeStamp(datetime.combine(self.to_date, time.max, timezone.utc))

    def contains(self, time_stamp: TimeStamp) -> bool:
        return self.start <= time_stamp <= self.end


@dataclass(frozen=True)
class Transaction:
    """One balance-affecting event.

    The sign of ``amount`` encodes direction: negative for outcome,
    positive for income.
    """

    id: str
    amount: Decimal
    time_stamp: TimeStamp

    def __post_init__(self) -> None:
        validate_identifier(self.id, "transaction id")
        object.__setattr__(self, "amount", _to_decimal(self.amount, "amount"))

    @classmethod
    def create(
        cls,
        amount,
        id_generator: IdGenerator,
    ) -> "Transaction":
        """Build a transaction with a fresh ID stamped with the current time."""
        return cls(
            id=id_generator.new_id(),
            amount=amount,
            time_stamp=TimeStamp.create_now(),
        )

    @property
    def is_outcome(self) -> bool:
        return self.amount < 0

    @property
    def is_income(self) -> bool:
        return self.amount > 0


__all__ = [
    "Balance",
    "AccountName",
    "Owner",
    "TimeStamp",
    "TransactionFilter",
    "Transaction",
]
