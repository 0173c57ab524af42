"""
Console client controller.

Owns the current ``Session`` value and the current route.  Every user
action goes through here; failures are reported through the ``alert``
callback and leave the state unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List

from client.api import ApiError, ExpenseApiClient
from client.session import Session, end_session, load_session, start_session
from client.storage import LocalStorage
from client.views import (
    Route,
    render_dashboard,
    render_landing,
    render_login,
    render_signup,
    resolve_route,
)
from utils.schemas import ExpenseRecord

logger = logging.getLogger(__name__)


class ExpenseTrackerApp:
    def __init__(
        self,
        api: ExpenseApiClient,
        storage: LocalStorage,
        alert: Callable[[str], None] = print,
    ):
        self.api = api
        self.storage = storage
        self.alert = alert
        self.session: Session = load_session(storage)
        self.route = resolve_route(self.session, Route.LANDING)
        self.expenses: List[ExpenseRecord] = []

    def navigate(self, requested: Route) -> Route:
        self.route = resolve_route(self.session, requested)
        if self.route is Route.HOME:
            self.refresh()
        return self.route

    def render(self) -> str:
        if self.route is Route.HOME and self.session.is_authenticated:
            return render_dashboard(self.session.user, self.expenses)
        if self.route is Route.LOGIN:
            return render_login()
        if self.route is Route.SIGNUP:
            return render_signup()
        return render_landing()

    # ── Anonymous actions ──────────────────────────────────────────────

    def signup(self, name: str, email: str, password: str) -> bool:
        """Create an account and send the user to the login page."""
        try:
            message = self.api.signup(email=email, password=password, name=name)
        except ApiError as exc:
            self.alert(exc.message or "Signup failed")
            return False
        self.alert(message)
        self.navigate(Route.LOGIN)
        return True

    def login(self, email: str, password: str) -> bool:
        try:
            result = self.api.login(email=email, password=password)
        except ApiError as exc:
            self.alert(exc.message or "Login failed")
            return False
        self.session = start_session(self.storage, result.token, result.user)
        self.navigate(Route.HOME)
        return True

    # ── Authenticated actions ──────────────────────────────────────────

    def logout(self) -> None:
        self.session = end_session(self.storage)
        self.expenses = []
        self.navigate(Route.LOGIN)

    def refresh(self) -> None:
        if not self.session.is_authenticated:
            return
        try:
            self.expenses = self.api.list_expenses(self.session)
        except ApiError as exc:
            logger.error("Error fetching expenses: %s", exc.message)

    def add_expense(self, title: str, amount: Any, category: str) -> bool:
        if not self.session.is_authenticated:
            return False
        try:
            self.api.add_expense(self.session, title=title, amount=amount, category=category)
        except ApiError:
            self.alert("Error adding expense")
            return False
        self.refresh()
        return True

    def delete_expense(self, expense_id: str) -> bool:
        if not self.session.is_authenticated:
            return False
        try:
            self.api.delete_expense(self.session, expense_id)
        except ApiError:
            self.alert("Error deleting expense")
            return False
        self.refresh()
        return True
