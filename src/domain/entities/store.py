"""
Store Entity

Represents a store account that signs in with email and password.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Store(SQLModel, table=True):
    """
    Store entity - the account record owning credentials and reset state.

    Business Rules:
    - Email is stored normalized (trimmed, lower-cased) and unique
    - Password stored as SHA-256 hex digest (64 chars)
    - reset_token and token_expiry are either both set or both null
    - At most one pending reset token per store
    """

    __tablename__ = "stores"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    store_name: Optional[str] = Field(default=None, max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=64)

    # Pending password reset
    reset_token: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )
    token_expiry: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
