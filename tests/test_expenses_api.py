"""
Tests for the expense endpoints, debug helpers, and error mapping.
"""

from unittest.mock import AsyncMock, patch


def _auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


class TestExpenses:
    def test_create_then_list(self, client, signup_and_login):
        token, user = signup_and_login(client, "a@example.com")
        r = client.post(
            "/api/expenses",
            json={"title": "Groceries", "amount": 42.5, "category": "Food"},
            headers=_auth(token),
        )
        assert r.status_code == 201
        created = r.json()
        assert created["owner_id"] == user["id"]

        listed = client.get("/api/expenses", headers=_auth(token)).json()
        assert len(listed) == 1
        item = listed[0]
        assert (item["title"], item["amount"], item["category"]) == ("Groceries", 42.5, "Food")
        assert item["owner_id"] == user["id"]
        assert item["id"] == created["id"]

    def test_amount_accepts_numeric_strings(self, client, signup_and_login):
        token, _ = signup_and_login(client, "s@example.com")
        r = client.post(
            "/api/expenses",
            json={"title": "Bus", "amount": "2.75", "category": "Transport"},
            headers=_auth(token),
        )
        assert r.status_code == 201
        assert r.json()["amount"] == 2.75

    def test_create_validation(self, client, signup_and_login):
        token, _ = signup_and_login(client, "v@example.com")
        r = client.post("/api/expenses", json={"title": "No amount", "category": "x"}, headers=_auth(token))
        assert r.status_code == 400
        assert "amount" in r.json()["message"]

    def test_list_newest_first(self, client, signup_and_login):
        token, _ = signup_and_login(client, "o@example.com")
        for title, when in [
            ("t1", "2024-01-01T10:00:00Z"),
            ("t3", "2024-03-01T10:00:00Z"),
            ("t2", "2024-02-01T10:00:00Z"),
        ]:
            r = client.post(
                "/api/expenses",
                json={"title": title, "amount": 1, "category": "c", "occurred_at": when},
                headers=_auth(token),
            )
            assert r.status_code == 201
        titles = [e["title"] for e in client.get("/api/expenses", headers=_auth(token)).json()]
        assert titles == ["t3", "t2", "t1"]

    def test_mixed_offsets_order_by_instant(self, client, signup_and_login):
        token, _ = signup_and_login(client, "tz@example.com")
        for title, when in [
            ("early", "2024-01-01T10:00:00+05:00"),
            ("late", "2024-01-01T07:00:00Z"),
        ]:
            r = client.post(
                "/api/expenses",
                json={"title": title, "amount": 1, "category": "c", "occurred_at": when},
                headers=_auth(token),
            )
            assert r.status_code == 201
        listed = client.get("/api/expenses", headers=_auth(token)).json()
        assert [e["title"] for e in listed] == ["late", "early"]
        early = listed[1]["occurred_at"]
        assert early.startswith("2024-01-01T05:00:00")
        assert early.endswith(("Z", "+00:00"))

    def test_accounts_are_isolated(self, client, signup_and_login):
        token_a, _ = signup_and_login(client, "a@example.com")
        token_b, _ = signup_and_login(client, "b@example.com")
        client.post("/api/expenses", json={"title": "A only", "amount": 5, "category": "c"}, headers=_auth(token_a))
        assert client.get("/api/expenses", headers=_auth(token_b)).json() == []

    def test_delete_own(self, client, signup_and_login):
        token, _ = signup_and_login(client, "d@example.com")
        eid = client.post(
            "/api/expenses", json={"title": "x", "amount": 1, "category": "c"}, headers=_auth(token),
        ).json()["id"]
        r = client.delete(f"/api/expenses/{eid}", headers=_auth(token))
        assert r.status_code == 200
        assert r.json() == {"message": "Expense deleted"}
        assert client.get("/api/expenses", headers=_auth(token)).json() == []

    def test_delete_foreign_is_silent(self, client, signup_and_login):
        token_a, _ = signup_and_login(client, "a@example.com")
        token_b, _ = signup_and_login(client, "b@example.com")
        eid_a = client.post(
            "/api/expenses", json={"title": "A", "amount": 1, "category": "c"}, headers=_auth(token_a),
        ).json()["id"]
        client.post("/api/expenses", json={"title": "B", "amount": 2, "category": "c"}, headers=_auth(token_b))
        before = client.get("/api/expenses", headers=_auth(token_b)).json()

        r = client.delete(f"/api/expenses/{eid_a}", headers=_auth(token_b))
        assert r.status_code == 200
        assert client.get("/api/expenses", headers=_auth(token_b)).json() == before
        assert len(client.get("/api/expenses", headers=_auth(token_a)).json()) == 1

    def test_delete_unknown_id(self, client, signup_and_login):
        token, _ = signup_and_login(client, "u@example.com")
        r = client.delete("/api/expenses/does-not-exist", headers=_auth(token))
        assert r.status_code == 200


class TestErrorsAndDebug:
    def test_storage_failure_is_500_with_message(self, client, signup_and_login):
        token, _ = signup_and_login(client, "f@example.com")
        with patch("database.expenses.list_by_owner", new_callable=AsyncMock, side_effect=RuntimeError("db down")):
            r = client.get("/api/expenses", headers=_auth(token))
        assert r.status_code == 500
        assert r.json() == {"message": "db down"}

    def test_health(self, client):
        assert client.get("/api/health").json() == {"status": "ok"}

    def test_debug_users_hides_hashes(self, client, signup_and_login):
        signup_and_login(client, "dbg@example.com", name="Debby")
        users = client.get("/api/debug/users").json()
        assert users == [{"id": users[0]["id"], "email": "dbg@example.com", "name": "Debby"}]

    def test_init_db_seeds_test_user(self, client):
        r = client.post("/api/init-db")
        assert r.status_code == 200
        login = client.post("/api/login", json={"email": "test@example.com", "password": "password123"})
        assert login.status_code == 200
        token = login.json()["token"]
        listed = client.get("/api/expenses", headers=_auth(token)).json()
        assert [e["title"] for e in listed] == ["Test Expense"]
        assert len(client.get("/api/debug/expenses").json()) == 1

    def test_debug_routes_hidden_when_disabled(self, make_client):
        client = make_client(debug=False)
        assert client.get("/api/debug/users").status_code == 404
        assert client.get("/api/debug/expenses").status_code == 404
        assert client.post("/api/init-db").status_code == 404
