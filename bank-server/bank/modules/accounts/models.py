"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    RMB = "RMB"

    @classmethod
    def is_supported(cls, value: str) -> bool:
        return value in cls._value2member_map_


@dataclass(slots=True, frozen=True)
class Account:
    id: int
    owner: str
    # decimal string, never negative
    balance: str
    currency: str
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class AccountListInput:
    owner: str
    page_id: int = 1
    page_size: int = 10

    @property
    def offset(self) -> int:
        return (self.page_id - 1) * self.page_size
