"""
HTTP client for the expense tracker API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from client.session import AuthenticatedSession
from utils.schemas import ExpenseRecord, LoginResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A non-2xx response, carrying the server's ``message``."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ExpenseApiClient:
    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = 10.0,
    ):
        self._client = httpx.Client(base_url=base_url.rstrip("/"), transport=transport, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ExpenseApiClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        session: Optional[AuthenticatedSession] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        headers = session.auth_header if session else {}
        try:
            resp = self._client.request(method, f"/api{path}", json=json, headers=headers)
        except httpx.HTTPError as exc:
            raise ApiError(f"Network error: {exc}") from exc

        if resp.is_error:
            try:
                message = resp.json().get("message") or resp.reason_phrase
            except ValueError:
                message = resp.text or resp.reason_phrase
            logger.debug("%s %s → %d: %s", method, path, resp.status_code, message)
            raise ApiError(message, status_code=resp.status_code)
        return resp.json()

    def signup(self, email: str, password: str, name: str) -> str:
        data = self._request("POST", "/signup", json={"email": email, "password": password, "name": name})
        return data["message"]

    def login(self, email: str, password: str) -> LoginResponse:
        data = self._request("POST", "/login", json={"email": email, "password": password})
        return LoginResponse.model_validate(data)

    def list_expenses(self, session: AuthenticatedSession) -> List[ExpenseRecord]:
        data = self._request("GET", "/expenses", session=session)
        return [ExpenseRecord.model_validate(item) for item in data]

    def add_expense(self, session: AuthenticatedSession, title: str, amount: Any, category: str) -> ExpenseRecord:
        data = self._request(
            "POST", "/expenses", session=session,
            json={"title": title, "amount": amount, "category": category},
        )
        return ExpenseRecord.model_validate(data)

    def delete_expense(self, session: AuthenticatedSession, expense_id: str) -> str:
        data = self._request("DELETE", f"/expenses/{expense_id}", session=session)
        return data["message"]
