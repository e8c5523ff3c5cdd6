"""Domain policies package."""

from .names import is_valid_display_name, normalize_display_name

__all__ = ["is_valid_display_name", "normalize_display_name"]
