"""Display-name rules shared by accounts, categories and owners."""


def normalize_display_name(name: str | None) -> str:
    """Return the name with surrounding whitespace removed.

    Args:
        name: Raw name entered by a user or loaded from storage.

    Returns:
        str: Trimmed name, empty when the input is missing.
    """
    if not name:
        return ""
    return name.strip()


def is_valid_display_name(name: str | None) -> bool:
    """Return True when the name has visible characters.

    Args:
        name: Name to evaluate.

    Returns:
        bool: True when the name should be accepted.
    """
    return bool(normalize_display_name(name))


__all__ = ["normalize_display_name", "is_valid_display_name"]
