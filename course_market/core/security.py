"""
security.py

비밀번호 해싱 및 JWT 토큰 생성/검증을 담당하는 보안 유틸리티 모음.

이 파일은 인증(auth) 로직에서 사용하는
저수준(low-level) 보안 기능만을 제공하며,
라우터나 비즈니스 로직은 포함하지 않는다.

주요 기능:
- 비밀번호 해싱 및 검증 (bcrypt)
- JWT Access Token 생성 (sub + role)
- JWT Refresh Token 생성 (sub)
- 토큰 디코딩 및 검증 (실패 시 TokenInvalid)

설계 원칙:
- Access Token과 Refresh Token은 서로 다른 시크릿으로 서명
- 토큰에 type 클레임을 넣어 종류가 섞여 쓰이는 것을 한 번 더 차단
- 서버 측 저장소 없음 (stateless) → 만료(exp)만이 수명 관리 수단
- 시크릿 / 만료 정책은 TokenConfig로 주입받아 테스트에서 교체 가능

관련 파일:
- course_market.core.config          : TokenConfig
- course_market.core.deps            : Access Token 검증 의존성
- course_market.services.session     : 로그인 / 재발급 흐름

"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal, Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from course_market.core.config import TokenConfig
from course_market.core.errors import TokenInvalid


# bcrypt 기반 비밀번호 해싱 컨텍스트
# deprecated="auto"로 향후 알고리즘 교체 가능하도록 설정

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

TokenType = Literal["access", "refresh"]


"""
비밀번호 해싱 함수

- 평문 비밀번호를 bcrypt 해시로 변환 (salt는 매번 랜덤)
- DB에는 해시 값만 저장

"""

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


"""
비밀번호 검증 함수

- 사용자가 입력한 평문 비밀번호와
  DB에 저장된 해시 값을 비교

"""

def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


# 존재하지 않는 이메일로 로그인할 때도 같은 양의 bcrypt 연산을 하기 위한 더미 해시
# 응답 시간으로 계정 존재 여부가 드러나지 않게 함
DUMMY_PASSWORD_HASH = get_password_hash("course-market-timing-dummy")


@dataclass(frozen=True)
class TokenClaims:
    subject: str
    token_type: TokenType
    expires_at: datetime
    role: Optional[str] = None


class TokenService:
    """Access / Refresh 토큰 발급기 겸 검증기.

    인스턴스는 불변 TokenConfig 하나만 들고 있고 그 외 상태는 없다.
    """

    def __init__(self, config: TokenConfig):
        self.config = config

    def _create_token(self, *, subject: str, token_type: TokenType, secret: str,
                      ttl, extra: Optional[dict] = None) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": subject,
            "type": token_type,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
        }
        if extra:
            payload.update(extra)
        return jwt.encode(payload, secret, algorithm=self.config.algorithm)

    def issue_access_token(self, principal_id: str, role: str) -> str:
        return self._create_token(
            subject=str(principal_id),
            token_type="access",
            secret=self.config.secret_key,
            ttl=self.config.access_ttl,
            extra={"role": role},
        )

    def issue_refresh_token(self, principal_id: str) -> str:
        return self._create_token(
            subject=str(principal_id),
            token_type="refresh",
            secret=self.config.refresh_secret_key,
            ttl=self.config.refresh_ttl,
        )

    def verify(self, token: str, expected_secret: str) -> TokenClaims:
        """토큰을 주어진 시크릿으로 검증하고 클레임을 반환한다.

        서명 불일치 / 형식 오류 / 만료 / 필수 클레임 누락은 전부 TokenInvalid.
        만료를 따로 구분하지 않는 이유는 호출 측이 어차피 같은 401로 처리하기 때문.
        """
        if not token or not isinstance(token, str):
            raise TokenInvalid("Empty token")
        try:
            payload = jwt.decode(token, expected_secret, algorithms=[self.config.algorithm])
        except JWTError as e:
            raise TokenInvalid(type(e).__name__) from e

        sub = payload.get("sub")
        token_type = payload.get("type")
        exp = payload.get("exp")
        if not sub or token_type not in ("access", "refresh") or exp is None:
            raise TokenInvalid("Missing claims")

        return TokenClaims(
            subject=sub,
            token_type=token_type,
            expires_at=datetime.fromtimestamp(int(exp), tz=timezone.utc),
            role=payload.get("role"),
        )

    def verify_access_token(self, token: str) -> TokenClaims:
        claims = self.verify(token, self.config.secret_key)
        if claims.token_type != "access":
            raise TokenInvalid("Not an access token")
        return claims

    def verify_refresh_token(self, token: str) -> TokenClaims:
        claims = self.verify(token, self.config.refresh_secret_key)
        if claims.token_type != "refresh":
            raise TokenInvalid("Not a refresh token")
        return claims
