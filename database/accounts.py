"""
Credential store: account creation and lookup.

Accounts are created once at signup and never updated or deleted.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.password import hash_password
from database.models import User
from utils.errors import DuplicateEmail

logger = logging.getLogger(__name__)


async def find_by_email(session: AsyncSession, email: str) -> Optional[User]:
    """Return the account registered under ``email`` (exact match), or None."""
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def create_account(
    session: AsyncSession,
    email: str,
    display_name: str,
    password: str,
    bcrypt_rounds: int = 10,
) -> uuid.UUID:
    """
    Persist a new account and return its id.

    Raises ``DuplicateEmail`` if the email is already registered, either
    found up front or reported by the unique constraint on flush.
    """
    if await find_by_email(session, email) is not None:
        raise DuplicateEmail()

    user = User(
        user_id=uuid.uuid4(),
        email=email,
        display_name=display_name,
        password_hash=hash_password(password, rounds=bcrypt_rounds),
    )
    session.add(user)
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        raise DuplicateEmail() from exc

    logger.info("Registered user %s (%s)", display_name, user.user_id)
    return user.user_id


async def list_accounts(session: AsyncSession) -> List[User]:
    result = await session.execute(select(User).order_by(User.created_at.asc()))
    return list(result.scalars().all())
