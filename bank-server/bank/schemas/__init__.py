"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Longest amount string accepted on the wire.
MAX_AMOUNT_LENGTH = 64


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_]+$")
    password: str = Field(..., min_length=6, max_length=72)
    full_name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserResponse(BaseModel):
    username: str
    full_name: str
    email: str
    password_changed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=72)


class LoginResponse(BaseModel):
    session_id: str
    access_token: str
    access_token_expires_at: datetime
    refresh_token: str
    refresh_token_expires_at: datetime
    token_type: str = "bearer"
    user: UserResponse


class RenewAccessTokenRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)


class RenewAccessTokenResponse(BaseModel):
    access_token: str
    access_token_expires_at: datetime
    token_type: str = "bearer"


class AccountCreate(BaseModel):
    currency: str = Field(..., min_length=1, max_length=16)


class AccountResponse(BaseModel):
    id: int
    owner: str
    balance: str
    currency: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class EntryResponse(BaseModel):
    id: int
    account_id: int
    amount: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TransferCreate(BaseModel):
    from_account_id: int = Field(..., ge=1)
    to_account_id: int = Field(..., ge=1)
    amount: str = Field(..., max_length=MAX_AMOUNT_LENGTH)

    @model_validator(mode="after")
    def check_distinct_accounts(self) -> "TransferCreate":
        if self.from_account_id == self.to_account_id:
            raise ValueError("from_account_id and to_account_id must differ")
        return self


class TransferResponse(BaseModel):
    id: int
    from_account_id: int
    to_account_id: int
    amount: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TransferResultResponse(BaseModel):
    transfer: TransferResponse
    from_account: AccountResponse
    to_account: AccountResponse
    from_entry: EntryResponse
    to_entry: EntryResponse

    model_config = ConfigDict(from_attributes=True)


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
