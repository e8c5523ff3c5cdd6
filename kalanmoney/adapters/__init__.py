"""Entry-point adapters."""
