"""
인증 기본 플로우 통합 테스트.
- 회원가입 → 토큰 2종 발급, 필수값 누락 / 이메일 중복 거부,
  탈퇴 후 같은 이메일 재가입, 로그인 실패 메시지 통일, 보호 API 접근까지 검증한다.
"""

from sqlalchemy import select

from course_market.models.user import User
from tests.helpers import API, admin_token, auth_header, login, register, unique_email


def test_register_returns_both_tokens(client):
    r = register(client, email="alice@x.com", password="pw123")
    assert r.status_code == 201, r.text

    data = r.json()["data"]
    assert data["email"] == "alice@x.com"
    assert data["name"] == "Alice Kim"
    assert data["role"] == "user"
    assert data["access_token"]
    assert data["refresh_token"]
    assert data["access_token"] != data["refresh_token"]
    assert "password" not in data and "password_hash" not in data


def test_register_requires_all_fields(client):
    r = client.post(f"{API}/users/register", json={"email": unique_email(), "password": "pw123"})
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "All fields are required"}


def test_register_duplicate_live_email(client):
    email = unique_email()
    assert register(client, email=email, password="pw123").status_code == 201

    dup = register(client, email=email, password="other-pw")
    assert dup.status_code == 400
    assert dup.json()["message"] == "User already exists"


def test_register_again_after_account_deleted(client, db_session):
    email = unique_email()
    first = register(client, email=email, password="pw123")
    assert first.status_code == 201, first.text
    first_id = first.json()["data"]["id"]

    token = admin_token(client, db_session)
    deleted = client.delete(f"{API}/users/{first_id}", headers=auth_header(token))
    assert deleted.status_code == 202, deleted.text

    again = register(client, email=email, password="pw456")
    assert again.status_code == 201, again.text
    assert again.json()["data"]["id"] != first_id

    # 탈퇴한 레코드는 그대로 남아 있음
    db_session.expire_all()
    rows = db_session.scalars(select(User).where(User.email == email)).all()
    assert len(rows) == 2
    assert sum(1 for u in rows if u.deleted_at is None) == 1


def test_login_success(client):
    email = unique_email()
    register(client, email=email, password="pw123")

    r = login(client, email=email, password="pw123")
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["access_token"] and data["refresh_token"]
    assert data["token_type"] == "bearer"


def test_login_failures_are_indistinguishable(client):
    email = unique_email()
    register(client, email=email, password="pw123")

    wrong_password = login(client, email=email, password="wrong")
    unknown_email = login(client, email=unique_email("ghost"), password="anything")

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.json()["message"] == "Invalid email or password"


def test_login_blocked_after_delete(client, db_session):
    email = unique_email()
    user_id = register(client, email=email, password="pw123").json()["data"]["id"]

    token = admin_token(client, db_session)
    client.delete(f"{API}/users/{user_id}", headers=auth_header(token))

    r = login(client, email=email, password="pw123")
    assert r.status_code == 401
    assert r.json()["message"] == "Invalid email or password"


def test_profile_requires_access_token(client):
    email = unique_email()
    data = register(client, email=email, password="pw123").json()["data"]

    ok = client.get(f"{API}/users/profile", headers=auth_header(data["access_token"]))
    assert ok.status_code == 200, ok.text
    assert ok.json()["data"]["email"] == email
    assert ok.json()["data"]["role"] == "user"

    missing = client.get(f"{API}/users/profile")
    assert missing.status_code == 401

    # refresh 토큰은 Bearer 로 쓸 수 없음
    wrong_class = client.get(f"{API}/users/profile", headers=auth_header(data["refresh_token"]))
    assert wrong_class.status_code == 401
    assert wrong_class.json()["message"] == "Could not validate credentials"
