"""
auth.py

인증(Authentication) API 모음.

이 파일은 회원 가입, 로그인, Access Token 재발급과 같이
사용자 인증 흐름 전반을 담당한다.
JWT 기반 인증 방식을 사용하며, Access Token + Refresh Token 구조를 따른다.

주요 기능:
- 회원 가입 (가입 즉시 토큰 2종 발급)
- 로그인 및 토큰 발급
- Refresh Token 기반 Access Token 재발급

설계 원칙:
- 토큰은 JSON 응답 바디로 전달, 이후 요청에서는 Authorization: Bearer 로 사용
- Refresh Token은 요청 바디로 받음 (쿠키 미사용)
- 실제 규칙은 services.session 에 있고 여기서는 입출력 변환만 수행

관련 파일:
- course_market.services.session  : register / login / refresh
- course_market.schemas.auth       : 인증 관련 요청/응답

"""

from fastapi import APIRouter, Depends, status

from course_market.core.deps import get_store, get_token_service
from course_market.core.security import TokenService
from course_market.schemas.auth import (
    AccessTokenRequest, AccessTokenResponse,
    LoginRequest, RegisterRequest, SessionResponse,
)
from course_market.services import session as session_service
from course_market.services.session import AuthSession
from course_market.services.store import EntityStore

router = APIRouter(prefix="/users", tags=["auth"])


def _session_body(auth: AuthSession) -> dict:
    return SessionResponse(
        id=auth.user.id,
        name=auth.user.name,
        email=auth.user.email,
        role=auth.user.role.value,
        access_token=auth.access_token,
        refresh_token=auth.refresh_token,
    ).model_dump(mode="json")


"""
회원 가입 API

- 이름 / 성 / 이메일 / 비밀번호 모두 필수
- 살아있는 계정과 이메일이 겹치면 가입 불가 (탈퇴한 계정의 이메일은 재사용 가능)
- 가입 시 기본 권한은 user

"""

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    data: RegisterRequest,
    store: EntityStore = Depends(get_store),
    tokens: TokenService = Depends(get_token_service),
):
    auth = session_service.register(
        store,
        tokens,
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        password=data.password,
    )
    return {
        "message": "User registered",
        "data": _session_body(auth),
    }


"""
로그인 API

- 이메일 / 비밀번호 인증
- 없는 이메일 / 틀린 비밀번호 모두 같은 401 메시지

"""

@router.post("/login")
def login(
    data: LoginRequest,
    store: EntityStore = Depends(get_store),
    tokens: TokenService = Depends(get_token_service),
):
    auth = session_service.login(store, tokens, email=data.email, password=data.password)
    return {"data": _session_body(auth)}


"""
Access Token 재발급 API

- Refresh Token 검증 후 회원이 아직 살아있을 때만 새 Access Token 발급
- Refresh Token 자체는 새로 발급하지 않음

"""

@router.post("/access-token")
def access_token(
    data: AccessTokenRequest,
    store: EntityStore = Depends(get_store),
    tokens: TokenService = Depends(get_token_service),
):
    new_access = session_service.refresh(store, tokens, data.refresh_token)
    return {"data": AccessTokenResponse(access_token=new_access).model_dump()}
