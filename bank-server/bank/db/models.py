"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from bank.infrastructure.database.base import Base

# bigserial on PostgreSQL, rowid alias on SQLite
BigId = BigInteger().with_variant(Integer(), "sqlite")


def generate_uuid() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    username = Column(String(50), primary_key=True)
    hashed_password = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password_changed_at = Column(DateTime(timezone=True), server_default=func.now())
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    accounts = relationship("Account", back_populates="user")


class Account(Base):
    __tablename__ = "accounts"
    __table_args__ = (UniqueConstraint("owner", "currency", name="accounts_owner_currency_key"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner = Column(String(50), ForeignKey("users.username"), nullable=False, index=True)
    balance = Column(Text, nullable=False, default="0")
    currency = Column(String(3), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="accounts")


class Entry(Base):
    __tablename__ = "entries"

    id = Column(BigId, primary_key=True, autoincrement=True)
    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    # negative for debits, positive for credits
    amount = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class Transfer(Base):
    __tablename__ = "transfers"
    __table_args__ = (Index("ix_transfers_from_account_id_to_account_id", "from_account_id", "to_account_id"),)

    id = Column(BigId, primary_key=True, autoincrement=True)
    from_account_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    to_account_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class Session(Base):
    __tablename__ = "sessions"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    username = Column(String(50), ForeignKey("users.username"), nullable=False, index=True)
    refresh_token = Column(String(1024), nullable=False)
    user_agent = Column(String(255), nullable=False, default="")
    client_ip = Column(String(45), nullable=False, default="")
    is_blocked = Column(Boolean, nullable=False, default=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
