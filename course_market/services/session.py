"""
services/session.py

인증 세션 서비스 (회원 가입 / 로그인 / Access Token 재발급).

요청 하나 단위로 동작하는 오케스트레이션 함수 모음이며
장기적으로 유지되는 상태는 없다.

주요 기능:
- register : 필수값 검사 → 활성 이메일 중복 검사 → 해싱 → 생성 → 토큰 2종 발급
- login    : 활성 회원 조회 → 비밀번호 검증 → 토큰 2종 발급
- refresh  : Refresh Token 검증 → 회원 재조회 → 새 Access Token 발급

설계 원칙:
- 로그인 실패 메시지는 이메일 없음 / 비밀번호 틀림을 구분하지 않음
- 재발급 시 회원이 탈퇴(툼스톤)했으면 절대 Access Token을 만들지 않음
- Refresh Token은 회전하지 않음 (재발급 응답에는 Access Token만)
- 이미 발급된 Access Token은 탈퇴 후에도 만료 전까지 유효 (stateless 설계의 한계)

관련 파일:
- course_market.core.security     : 해싱 / TokenService
- course_market.services.users    : 회원 생성 규칙
- course_market.routers.auth      : HTTP 엔드포인트

"""

import logging
from dataclasses import dataclass

from course_market.core.errors import AuthError, TokenInvalid, ValidationError
from course_market.core.security import DUMMY_PASSWORD_HASH, TokenService, verify_password
from course_market.models.user import Role, User
from course_market.services.lifecycle import as_uuid
from course_market.services.store import EntityStore
from course_market.services.users import UserCRUD

logger = logging.getLogger("course_market.auth")

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass
class AuthSession:
    user: User
    access_token: str
    refresh_token: str


def _issue_session(tokens: TokenService, user: User) -> AuthSession:
    return AuthSession(
        user=user,
        access_token=tokens.issue_access_token(str(user.id), user.role.value),
        refresh_token=tokens.issue_refresh_token(str(user.id)),
    )


def register(store: EntityStore, tokens: TokenService, *,
             first_name, last_name, email, password) -> AuthSession:
    user = UserCRUD(store).create({
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "password": password,
        "role": Role.USER,
    })
    logger.info("User registered: %s", user.id)
    return _issue_session(tokens, user)


def login(store: EntityStore, tokens: TokenService, *, email, password) -> AuthSession:
    user = UserCRUD(store).find_live_by_email(email) if email else None

    if user is None:
        # 없는 계정도 bcrypt 한 번 돌려서 응답 시간 맞춤
        verify_password(password or "", DUMMY_PASSWORD_HASH)
        logger.info("Login failed: unknown email")
        raise AuthError(INVALID_CREDENTIALS)

    if not password or not verify_password(password, user.password_hash):
        logger.info("Login failed: bad password for %s", user.id)
        raise AuthError(INVALID_CREDENTIALS)

    return _issue_session(tokens, user)


def refresh(store: EntityStore, tokens: TokenService, refresh_token) -> str:
    if not refresh_token:
        raise ValidationError("Refresh token is required")

    try:
        claims = tokens.verify_refresh_token(refresh_token)
    except TokenInvalid as e:
        logger.warning("Refresh rejected: %s", e)
        raise AuthError("Invalid refresh token")

    user_id = as_uuid(claims.subject)
    if user_id is None:
        raise AuthError("Invalid refresh token")

    # 토큰 발급 이후 탈퇴한 회원이면 여기서 막힘
    user = store.find_unique(User, User.id == user_id)
    if user is None:
        logger.warning("Refresh rejected: user %s not live", user_id)
        raise AuthError("User not found")

    return tokens.issue_access_token(str(user.id), user.role.value)
