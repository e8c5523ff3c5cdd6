"""Domain exception hierarchy.

Every error raised by KalanMoney derives from ``KalanMoneyError`` so that
callers can tell application failures apart from storage driver errors.
"""


class KalanMoneyError(Exception):
    """Base class for KalanMoney errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DomainValidationError(KalanMoneyError):
    """Raised when a value object or entity receives invalid input."""


__all__ = ["KalanMoneyError", "DomainValidationError"]
