"""Ledger entry domain models."""

from .models import Entry

__all__ = ["Entry"]
