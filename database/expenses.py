"""
Expense store: owner-scoped expense records.

Every query here filters on ``owner_id``; callers pass the id resolved by
the access guard, never one taken from a request body.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Expense

logger = logging.getLogger(__name__)


def _to_uuid(value: str | uuid.UUID) -> uuid.UUID:
    return uuid.UUID(value) if isinstance(value, str) else value


def _as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


async def list_by_owner(session: AsyncSession, owner_id: str | uuid.UUID) -> List[Expense]:
    """Return the owner's expenses, most recent ``occurred_at`` first."""
    result = await session.execute(
        select(Expense)
        .where(Expense.owner_id == _to_uuid(owner_id))
        .order_by(Expense.occurred_at.desc())
    )
    return list(result.scalars().all())


async def create(
    session: AsyncSession,
    owner_id: str | uuid.UUID,
    title: str,
    amount: float,
    category: str,
    occurred_at: Optional[datetime] = None,
) -> Expense:
    expense = Expense(
        expense_id=uuid.uuid4(),
        owner_id=_to_uuid(owner_id),
        title=title,
        amount=amount,
        category=category,
        occurred_at=_as_utc(occurred_at) if occurred_at else datetime.now(timezone.utc),
    )
    session.add(expense)
    await session.flush()
    logger.debug("Created expense %s for %s", expense.expense_id, expense.owner_id)
    return expense


async def delete_owned(
    session: AsyncSession,
    record_id: str | uuid.UUID,
    owner_id: str | uuid.UUID,
) -> None:
    """
    Delete ``record_id`` if it belongs to ``owner_id``.

    Unknown, foreign, or malformed ids are a silent no-op.
    """
    try:
        rid = _to_uuid(record_id)
    except ValueError:
        logger.debug("Ignoring delete of malformed expense id %r", record_id)
        return

    result = await session.execute(
        delete(Expense).where(
            Expense.expense_id == rid,
            Expense.owner_id == _to_uuid(owner_id),
        )
    )
    await session.flush()
    if not result.rowcount:
        logger.debug("Delete of expense %s by %s matched nothing", rid, owner_id)


async def list_all(session: AsyncSession) -> List[Expense]:
    result = await session.execute(select(Expense).order_by(Expense.occurred_at.desc()))
    return list(result.scalars().all())
