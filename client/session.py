"""
Client session state.

A session is either ``AnonymousSession`` or ``AuthenticatedSession``.  The
value is read from local storage once at startup and then passed around
explicitly; transitions return a new value and persist it.
"""

from __future__ import annotations

import logging
from typing import Union

from pydantic import BaseModel, ValidationError

from client.storage import LocalStorage
from utils.schemas import UserSummary

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"


class AnonymousSession(BaseModel):
    @property
    def is_authenticated(self) -> bool:
        return False


class AuthenticatedSession(BaseModel):
    token: str
    user: UserSummary

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def auth_header(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"}


Session = Union[AnonymousSession, AuthenticatedSession]


def load_session(storage: LocalStorage) -> Session:
    """Build the initial session from storage; no stored token means anonymous."""
    token = storage.get(TOKEN_KEY)
    if not token:
        return AnonymousSession()
    try:
        user = UserSummary.model_validate(storage.get(USER_KEY) or {})
    except ValidationError:
        logger.warning("Stored user summary is invalid; starting anonymous")
        return AnonymousSession()
    return AuthenticatedSession(token=token, user=user)


def start_session(storage: LocalStorage, token: str, user: UserSummary) -> AuthenticatedSession:
    """Transition after a successful login."""
    storage.set(TOKEN_KEY, token)
    storage.set(USER_KEY, user.model_dump())
    return AuthenticatedSession(token=token, user=user)


def end_session(storage: LocalStorage) -> AnonymousSession:
    storage.remove(TOKEN_KEY)
    storage.remove(USER_KEY)
    return AnonymousSession()
