"""Infrastructure adapters for KalanMoney."""
