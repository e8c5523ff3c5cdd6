"""KalanMoney: personal accounts, categories and running balances."""

__version__ = "0.1.0"
