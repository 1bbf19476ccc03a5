"""
토큰 발급기/검증기와 비밀번호 해셔 단위 테스트.
DB / HTTP 없이 TokenService만 직접 사용한다.
"""

from datetime import timedelta

import pytest

from course_market.core.config import Settings, TokenConfig
from course_market.core.errors import TokenInvalid
from course_market.core.security import TokenService, get_password_hash, verify_password

CONFIG = TokenConfig(secret_key="access-secret", refresh_secret_key="refresh-secret")


@pytest.fixture()
def tokens():
    return TokenService(CONFIG)


def test_access_token_carries_subject_and_role(tokens):
    token = tokens.issue_access_token("user-1", "admin")
    claims = tokens.verify_access_token(token)
    assert claims.subject == "user-1"
    assert claims.role == "admin"
    assert claims.token_type == "access"


def test_refresh_token_has_no_role(tokens):
    claims = tokens.verify_refresh_token(tokens.issue_refresh_token("user-1"))
    assert claims.subject == "user-1"
    assert claims.role is None
    assert claims.token_type == "refresh"


def test_refresh_outlives_access(tokens):
    access = tokens.verify_access_token(tokens.issue_access_token("u", "user"))
    refresh = tokens.verify_refresh_token(tokens.issue_refresh_token("u"))
    assert refresh.expires_at > access.expires_at


def test_token_classes_do_not_cross_verify(tokens):
    access = tokens.issue_access_token("user-1", "user")
    refresh = tokens.issue_refresh_token("user-1")

    with pytest.raises(TokenInvalid):
        tokens.verify(access, CONFIG.refresh_secret_key)
    with pytest.raises(TokenInvalid):
        tokens.verify(refresh, CONFIG.secret_key)
    with pytest.raises(TokenInvalid):
        tokens.verify_refresh_token(access)
    with pytest.raises(TokenInvalid):
        tokens.verify_access_token(refresh)


def test_type_claim_blocks_refresh_even_with_shared_secret():
    shared = TokenService(TokenConfig(secret_key="same", refresh_secret_key="same"))
    refresh = shared.issue_refresh_token("user-1")
    with pytest.raises(TokenInvalid):
        shared.verify_access_token(refresh)


def test_expired_token_is_invalid():
    expired = TokenService(TokenConfig(
        secret_key="access-secret",
        refresh_secret_key="refresh-secret",
        access_ttl=timedelta(seconds=-5),
    ))
    token = expired.issue_access_token("user-1", "user")
    with pytest.raises(TokenInvalid):
        expired.verify_access_token(token)


@pytest.mark.parametrize("garbage", ["", "not-a-jwt", "a.b.c"])
def test_malformed_token_is_invalid(tokens, garbage):
    with pytest.raises(TokenInvalid):
        tokens.verify_access_token(garbage)


def test_password_hash_is_salted():
    first = get_password_hash("pw123")
    second = get_password_hash("pw123")
    assert first != second
    assert verify_password("pw123", first)
    assert verify_password("pw123", second)
    assert not verify_password("pw124", first)


def test_settings_reject_shared_secret():
    with pytest.raises(ValueError):
        Settings(DATABASE_URL="sqlite://", SECRET_KEY="same", REFRESH_SECRET_KEY="same")


def test_settings_build_token_config():
    s = Settings(
        DATABASE_URL="sqlite://",
        SECRET_KEY="a",
        REFRESH_SECRET_KEY="b",
        ACCESS_TOKEN_EXPIRE_MINUTES=5,
        REFRESH_TOKEN_EXPIRE_DAYS=7,
    )
    cfg = s.token_config()
    assert cfg.access_ttl == timedelta(minutes=5)
    assert cfg.refresh_ttl == timedelta(days=7)
    assert cfg.secret_key != cfg.refresh_secret_key
