"""
Usage:
    python -m client

Talks to the API at ``API_URL`` and keeps the session in
``CLIENT_STORAGE_PATH``.
"""

from __future__ import annotations

from getpass import getpass
from typing import Callable

from client.api import ExpenseApiClient
from client.app import ExpenseTrackerApp
from client.storage import LocalStorage
from client.views import Route
from config.settings import config

Prompt = Callable[[str], str]


def _landing(app: ExpenseTrackerApp, choice: str) -> None:
    if choice == "l":
        app.navigate(Route.LOGIN)
    elif choice == "s":
        app.navigate(Route.SIGNUP)
    else:
        print(f"Unknown option {choice!r}.")


def _login(app: ExpenseTrackerApp, ask: Prompt, ask_secret: Prompt) -> None:
    email = ask("Email (blank to go back): ").strip()
    if not email:
        app.navigate(Route.LANDING)
        return
    app.login(email, ask_secret("Password: "))


def _signup(app: ExpenseTrackerApp, ask: Prompt, ask_secret: Prompt) -> None:
    name = ask("Name (blank to go back): ").strip()
    if not name:
        app.navigate(Route.LANDING)
        return
    app.signup(name, ask("Email: ").strip(), ask_secret("Password: "))


def _dashboard(app: ExpenseTrackerApp, choice: str, ask: Prompt) -> None:
    if choice == "a":
        app.add_expense(
            ask("Title: ").strip(),
            ask("Amount: ").strip(),
            ask("Category: ").strip(),
        )
    elif choice == "d":
        raw = ask("Number to delete: ").strip()
        if raw.isdigit() and 1 <= int(raw) <= len(app.expenses):
            app.delete_expense(app.expenses[int(raw) - 1].id)
        else:
            print("No such expense.")
    elif choice == "r":
        app.refresh()
    elif choice == "o":
        app.logout()
    else:
        print(f"Unknown option {choice!r}.")


def run_once(app: ExpenseTrackerApp, ask: Prompt = input, ask_secret: Prompt = getpass) -> bool:
    """Render the current view and handle one round of input.  False means quit."""
    print()
    print(app.render())
    if app.route is Route.LOGIN:
        _login(app, ask, ask_secret)
        return True
    if app.route is Route.SIGNUP:
        _signup(app, ask, ask_secret)
        return True

    choice = ask("> ").strip().lower()
    if choice == "q":
        return False
    if app.route is Route.HOME:
        _dashboard(app, choice, ask)
    else:
        _landing(app, choice)
    return True


def main() -> None:
    with ExpenseApiClient(config.api_url) as api:
        app = ExpenseTrackerApp(api, LocalStorage(config.client_storage_path))
        app.navigate(app.route)
        while run_once(app):
            pass


if __name__ == "__main__":
    main()
