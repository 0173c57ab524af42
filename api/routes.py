"""
REST API routes for expenses plus health and debug helpers.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_context, get_current_user_id
from core.context import AppContext
from database import accounts, expenses
from utils.schemas import (
    AccountRecord,
    ExpenseCreate,
    ExpenseRecord,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# The guard is declared before the session so an unauthenticated request
# never reaches the store.


@router.get("/expenses", response_model=List[ExpenseRecord])
async def list_expenses(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> List[ExpenseRecord]:
    rows = await expenses.list_by_owner(session, user_id)
    return [ExpenseRecord.from_row(r) for r in rows]


@router.post("/expenses", response_model=ExpenseRecord, status_code=status.HTTP_201_CREATED)
async def create_expense(
    req: ExpenseCreate,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> ExpenseRecord:
    row = await expenses.create(
        session,
        owner_id=user_id,
        title=req.title,
        amount=req.amount,
        category=req.category,
        occurred_at=req.occurred_at,
    )
    return ExpenseRecord.from_row(row)


@router.delete("/expenses/{expense_id}", response_model=MessageResponse)
async def delete_expense(
    expense_id: str,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Delete an owned expense.  Succeeds even when nothing matched."""
    await expenses.delete_owned(session, expense_id, user_id)
    return {"message": "Expense deleted"}


@router.get("/health")
async def health() -> Dict[str, Any]:
    return {"status": "ok"}


# ── Debug endpoints (only when settings.debug) ─────────────────────────


def require_debug(ctx: AppContext = Depends(get_context)) -> None:
    if not ctx.settings.debug:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")


@router.get("/debug/users", response_model=List[AccountRecord], dependencies=[Depends(require_debug)])
async def debug_users(session: AsyncSession = Depends(db_session)) -> List[AccountRecord]:
    return [AccountRecord.from_row(u) for u in await accounts.list_accounts(session)]


@router.get("/debug/expenses", response_model=List[ExpenseRecord], dependencies=[Depends(require_debug)])
async def debug_expenses(session: AsyncSession = Depends(db_session)) -> List[ExpenseRecord]:
    return [ExpenseRecord.from_row(r) for r in await expenses.list_all(session)]


TEST_USER_EMAIL = "test@example.com"
TEST_USER_PASSWORD = "password123"


@router.post("/init-db", dependencies=[Depends(require_debug)])
async def init_db(
    session: AsyncSession = Depends(db_session),
    ctx: AppContext = Depends(get_context),
) -> Dict[str, Any]:
    """Seed a test user (if missing) and add one test expense for it."""
    user = await accounts.find_by_email(session, TEST_USER_EMAIL)
    if user is None:
        user_id = await accounts.create_account(
            session,
            email=TEST_USER_EMAIL,
            display_name="Test User",
            password=TEST_USER_PASSWORD,
            bcrypt_rounds=ctx.settings.bcrypt_rounds,
        )
    else:
        user_id = user.user_id

    await expenses.create(session, user_id, title="Test Expense", amount=100, category="Food")
    logger.info("Seeded test data for %s", user_id)
    return {"message": "Database initialized with test data", "userId": str(user_id)}
