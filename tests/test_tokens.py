"""Token issuer / verifier unit tests."""

from datetime import timedelta

import jwt
import pytest

from postboard.auth.jwt import (
    TokenError,
    TokenExpiredError,
    TokenType,
    create_access_token,
    create_refresh_token,
    create_token,
    verify_token,
)
from postboard.config import settings


def test_access_token_round_trip():
    token = create_access_token("64b000000000000000000001")
    payload = verify_token(token, TokenType.ACCESS)
    assert payload["sub"] == "64b000000000000000000001"
    assert "exp" in payload
    assert "iat" in payload


def test_access_token_uses_configured_lifetime():
    payload = verify_token(create_access_token("u1"), TokenType.ACCESS)
    lifetime = payload["exp"] - payload["iat"]
    assert abs(lifetime - settings.jwt_token_expiration.total_seconds()) <= 1


def test_refresh_token_has_no_expiry():
    payload = verify_token(create_refresh_token("u1"), TokenType.REFRESH)
    assert "exp" not in payload


def test_tokens_for_same_subject_are_distinct():
    """Tokens minted back to back must never collide."""
    tokens = {create_refresh_token("u1") for _ in range(20)}
    assert len(tokens) == 20


def test_kinds_use_separate_secrets():
    with pytest.raises(TokenError):
        verify_token(create_access_token("u1"), TokenType.REFRESH)
    with pytest.raises(TokenError):
        verify_token(create_refresh_token("u1"), TokenType.ACCESS)


def test_expired_access_token():
    token = create_token("u1", TokenType.ACCESS, expires_in=timedelta(seconds=-5))
    with pytest.raises(TokenExpiredError):
        verify_token(token, TokenType.ACCESS)


def test_tampered_token():
    token = create_access_token("u1")
    with pytest.raises(TokenError):
        verify_token(token[:-2] + ("aa" if token[-2:] != "aa" else "bb"), TokenType.ACCESS)


def test_token_without_subject_is_rejected():
    token = jwt.encode({"iat": 0}, settings.access_token_secret, algorithm="HS256")
    with pytest.raises(TokenError):
        verify_token(token, TokenType.ACCESS)
