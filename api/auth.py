"""
Auth API routes — signup, login.

Route prefix: /api
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_context
from auth.password import verify_password
from core.context import AppContext
from database import accounts
from utils.errors import InvalidCredentials, ValidationError
from utils.schemas import LoginRequest, LoginResponse, MessageResponse, SignupRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    req: SignupRequest,
    session: AsyncSession = Depends(db_session),
    ctx: AppContext = Depends(get_context),
) -> Dict[str, Any]:
    """Register a new user.  Does not log the user in."""
    await accounts.create_account(
        session,
        email=req.email,
        display_name=req.name,
        password=req.password,
        bcrypt_rounds=ctx.settings.bcrypt_rounds,
    )
    return {"message": "User created successfully"}


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    session: AsyncSession = Depends(db_session),
    ctx: AppContext = Depends(get_context),
) -> Dict[str, Any]:
    """Login with email + password."""
    if not req.email or not req.password:
        raise ValidationError("Email and password are required")

    user = await accounts.find_by_email(session, req.email)
    if user is None or not verify_password(req.password, user.password_hash):
        logger.info("Failed login attempt")
        raise InvalidCredentials()

    token = ctx.tokens.issue(str(user.user_id))
    logger.info("Login: %s (%s)", user.display_name, user.user_id)

    return {
        "token": token,
        "user": {
            "id": str(user.user_id),
            "email": user.email,
            "name": user.display_name,
        },
    }
