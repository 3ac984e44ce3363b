"""Ledger-backed multi-currency banking service."""

__version__ = "0.1.0"
