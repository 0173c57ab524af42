"""
View routing and text rendering for the console client.

``resolve_route`` is a pure function of the session and the requested
route: anonymous sessions never see the dashboard and authenticated ones
never see the landing/login/signup pages.
"""

from __future__ import annotations

from enum import Enum
from typing import List

from client.session import Session
from utils.schemas import ExpenseRecord, UserSummary


class Route(str, Enum):
    LANDING = "landing"
    LOGIN = "login"
    SIGNUP = "signup"
    HOME = "home"


ANONYMOUS_ROUTES = {Route.LANDING, Route.LOGIN, Route.SIGNUP}


def resolve_route(session: Session, requested: Route) -> Route:
    if session.is_authenticated:
        return Route.HOME
    if requested in ANONYMOUS_ROUTES:
        return requested
    return Route.LANDING


def total_amount(expenses: List[ExpenseRecord]) -> float:
    return sum(e.amount for e in expenses)


def render_landing() -> str:
    return "\n".join([
        "Expense Tracker",
        "Track where your money goes.",
        "  [l] Login   [s] Sign up   [q] Quit",
    ])


def render_login() -> str:
    return "Login\n  Enter your email and password. Leave the email blank to go back."


def render_signup() -> str:
    return "Sign up\n  Enter your name, email and password. Leave the name blank to go back."


def render_dashboard(user: UserSummary, expenses: List[ExpenseRecord]) -> str:
    lines = [f"Welcome, {user.name}!", "", "Your Expenses"]
    if not expenses:
        lines.append("  No expenses yet. Add your first expense above!")
    else:
        for idx, e in enumerate(expenses, start=1):
            lines.append(
                f"  {idx:>3}. {e.title} | {e.category} • "
                f"{e.occurred_at.date().isoformat()}  ${e.amount:.2f}"
            )
        lines.append(f"  Total: ${total_amount(expenses):.2f}")
    lines.append("  [a] Add   [d] Delete   [r] Refresh   [o] Logout   [q] Quit")
    return "\n".join(lines)
