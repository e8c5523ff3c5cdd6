"""Tests for display-name policies."""

from kalanmoney.domain.policies import (
    is_valid_display_name,
    normalize_display_name,
)


def test_normalize_display_name_trims_and_handles_missing() -> None:
    assert normalize_display_name("  Rent ") == "Rent"
    assert normalize_display_name(None) == ""


def test_is_valid_display_name() -> None:
    assert is_valid_display_name("Rent")
    assert not is_valid_display_name("   ")
    assert not is_valid_display_name(None)
