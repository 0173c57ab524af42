"""
Pydantic schemas for the expense tracker API.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


# ═══════════════════════════════════════════════════════════════════════════════
# Auth — Input / Output
# ═══════════════════════════════════════════════════════════════════════════════


class SignupRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=4, max_length=128)
    name: str = Field(..., min_length=1, max_length=128)


class LoginRequest(BaseModel):
    """Both fields are optional here so the handler can answer missing ones itself."""

    email: Optional[str] = None
    password: Optional[str] = None


class UserSummary(BaseModel):
    id: str
    email: str
    name: str


class LoginResponse(BaseModel):
    token: str
    user: UserSummary


class MessageResponse(BaseModel):
    message: str


# ═══════════════════════════════════════════════════════════════════════════════
# Expenses
# ═══════════════════════════════════════════════════════════════════════════════


class ExpenseCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=512)
    amount: float
    category: str = Field(..., min_length=1, max_length=128)
    occurred_at: Optional[datetime] = None


def _utc(value: datetime) -> datetime:
    # SQLite hands back naive values; everything is stored in UTC.
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


class ExpenseRecord(BaseModel):
    id: str
    owner_id: str
    title: str
    amount: float
    category: str
    occurred_at: datetime

    @classmethod
    def from_row(cls, row) -> "ExpenseRecord":
        return cls(
            id=str(row.expense_id),
            owner_id=str(row.owner_id),
            title=row.title,
            amount=row.amount,
            category=row.category,
            occurred_at=_utc(row.occurred_at),
        )


class AccountRecord(BaseModel):
    """Public view of an account; the password hash is never included."""

    id: str
    email: str
    name: str

    @classmethod
    def from_row(cls, row) -> "AccountRecord":
        return cls(id=str(row.user_id), email=row.email, name=row.display_name)
