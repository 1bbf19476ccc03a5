"""
config.py

애플리케이션 전역 설정(Configuration) 관리 파일.

이 파일은 .env 환경 변수들을 Pydantic BaseSettings를 통해 로드하여
애플리케이션 전반에서 공통으로 사용하는 설정 값을 제공한다.

주요 설정 항목:
- 데이터베이스 연결 정보
- JWT 인증 관련 시크릿 및 만료 정책 (access / refresh 분리)
- CORS 허용 도메인 목록
- 로그 레벨 및 API prefix

설계 원칙:
- 모든 환경 변수는 이 파일을 통해서만 접근
- 토큰 관련 값은 TokenConfig(불변 값 객체)로 묶어서 토큰 서비스에 주입
- 설정 값은 런타임 중 변경되지 않는 불변 객체로 취급

관련 파일:
- course_market.main             : CORS / 로깅 초기화 시 설정 사용
- course_market.core.security    : TokenConfig 사용
- course_market.db.session       : DATABASE_URL 사용

"""

from dataclasses import dataclass
from datetime import timedelta
from typing import List

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


"""
토큰 발급/검증에 필요한 값 묶음

- access / refresh 시크릿은 반드시 서로 달라야 함
- frozen=True 로 생성 이후 변경 불가

"""

@dataclass(frozen=True)
class TokenConfig:
    secret_key: str
    refresh_secret_key: str
    algorithm: str = "HS256"
    access_ttl: timedelta = timedelta(minutes=30)
    refresh_ttl: timedelta = timedelta(days=14)


# .env 파일에 정의된 환경 변수를 로드하는 설정 클래스
# extra="ignore" 옵션으로 정의되지 않은 환경 변수는 무시
class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str
    TEST_DATABASE_URL: str | None = None

    SECRET_KEY: str
    REFRESH_SECRET_KEY: str
    ALGORITHM: str = "HS256"

    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    REFRESH_TOKEN_EXPIRE_DAYS: int = 14

    API_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # CORS 허용 도메인 (프론트엔드 주소)
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    @model_validator(mode="after")
    def _check_secrets(self) -> "Settings":
        # 같은 시크릿이면 refresh 토큰으로 access 토큰 위조 가능
        if self.SECRET_KEY == self.REFRESH_SECRET_KEY:
            raise ValueError("SECRET_KEY and REFRESH_SECRET_KEY must differ")
        return self

    def token_config(self) -> TokenConfig:
        return TokenConfig(
            secret_key=self.SECRET_KEY,
            refresh_secret_key=self.REFRESH_SECRET_KEY,
            algorithm=self.ALGORITHM,
            access_ttl=timedelta(minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES),
            refresh_ttl=timedelta(days=self.REFRESH_TOKEN_EXPIRE_DAYS),
        )


# 애플리케이션 전역에서 import하여 사용하는 Settings 인스턴스
# 실행 시 한 번만 생성됨
settings = Settings()
