"""
Tests for the token service and password hashing.
"""

import json
from base64 import b64decode, b64encode
from unittest.mock import patch

import pytest

from auth.jwt import TokenService
from auth.password import hash_password, verify_password
from utils.errors import InvalidToken


class TestTokenService:
    def setup_method(self):
        self.tokens = TokenService("unit-test-secret")

    def test_issue_then_verify(self):
        token = self.tokens.issue("user-123")
        assert self.tokens.verify(token) == "user-123"

    def test_payload_is_visible(self):
        token = self.tokens.issue("user-123")
        payload = json.loads(b64decode(token.split(".", 1)[0]))
        assert payload["user_id"] == "user-123"
        assert isinstance(payload["iat"], int)

    def test_old_tokens_still_verify(self):
        with patch("auth.jwt.time.time", return_value=0):
            token = self.tokens.issue("user-1")
        assert self.tokens.verify(token) == "user-1"

    def test_tampered_payload_rejected(self):
        token = self.tokens.issue("user-1")
        _, sig = token.split(".", 1)
        forged = b64encode(json.dumps({"user_id": "user-2", "iat": 0}).encode()).decode()
        with pytest.raises(InvalidToken, match="signature"):
            self.tokens.verify(forged + "." + sig)

    def test_other_secret_rejected(self):
        token = TokenService("another-secret").issue("user-1")
        with pytest.raises(InvalidToken):
            self.tokens.verify(token)

    @pytest.mark.parametrize("token", [None, "", "no-dot-here", "!!!.abc", "abc.def"])
    def test_malformed_tokens_rejected(self, token):
        with pytest.raises(InvalidToken):
            self.tokens.verify(token)

    def test_signed_payload_without_subject_rejected(self):
        raw = json.dumps({"iat": 1}).encode()
        token = b64encode(raw).decode() + "." + self.tokens._sign(raw)
        with pytest.raises(InvalidToken, match="subject"):
            self.tokens.verify(token)

    def test_signature_is_deterministic(self):
        with patch("auth.jwt.time.time", return_value=1000):
            assert self.tokens.issue("u") == self.tokens.issue("u")

    def test_empty_secret_refused(self):
        with pytest.raises(ValueError):
            TokenService("")


class TestPasswordHashing:
    def test_hash_verifies(self):
        hashed = hash_password("hunter22", rounds=4)
        assert hashed != "hunter22"
        assert verify_password("hunter22", hashed)

    def test_wrong_password(self):
        hashed = hash_password("hunter22", rounds=4)
        assert not verify_password("hunter23", hashed)

    def test_salted(self):
        assert hash_password("same", rounds=4) != hash_password("same", rounds=4)

    def test_garbage_hash_is_false(self):
        assert verify_password("x", "not-a-bcrypt-hash") is False
