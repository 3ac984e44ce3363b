"""Domain models for transfers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from bank.modules.accounts.models import Account
from bank.modules.entries.models import Entry


@dataclass(slots=True, frozen=True)
class Transfer:
    id: int
    from_account_id: int
    to_account_id: int
    # magnitude only; direction comes from the account ids
    amount: str
    created_at: Optional[datetime] = None


@dataclass(slots=True, frozen=True)
class TransferRequest:
    username: str
    from_account_id: int
    to_account_id: int
    amount: str


@dataclass(slots=True, frozen=True)
class TransferResult:
    """Rows written by one transfer, read back inside its transaction."""

    transfer: Transfer
    from_account: Account
    to_account: Account
    from_entry: Entry
    to_entry: Entry
