"""Domain models for ledger entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True, frozen=True)
class Entry:
    id: int
    account_id: int
    # signed decimal string: negative for debits, positive for credits
    amount: str
    created_at: Optional[datetime] = None
