"""
Request-level access guard and per-request resources.

``get_current_user_id`` turns an ``Authorization: Bearer <token>`` header
into the caller's account id, or rejects the request with ``Unauthorized``
before the route handler or the database is reached.  ``db_session`` opens
one session per request from the ``AppContext`` session factory.
"""

from __future__ import annotations

import logging
from typing import AsyncGenerator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from core.context import AppContext
from utils.errors import InvalidToken, Unauthorized

logger = logging.getLogger(__name__)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


async def db_session(
    ctx: AppContext = Depends(get_context),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session that commits on success and rolls back on error."""
    async with ctx.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_current_user_id(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    ctx: AppContext = Depends(get_context),
) -> str:
    """
    Extract and verify the Bearer token, returning the authenticated
    ``user_id`` (UUID string).

    Raises ``Unauthorized`` before the route handler runs when the header
    is missing, not a Bearer credential, or carries an invalid token.
    """
    if not authorization:
        raise Unauthorized("No token provided")
    scheme, _, token = authorization.partition(" ")
    if scheme != "Bearer" or not token.strip():
        raise Unauthorized("No token provided")

    try:
        return ctx.tokens.verify(token.strip())
    except InvalidToken as exc:
        logger.debug("Rejected bearer token: %s", exc.message)
        raise Unauthorized("Invalid token") from exc
