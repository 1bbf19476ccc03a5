"""
session.py

데이터베이스 엔진 및 세션(Session) 관리 파일.

FastAPI 의존성(get_db)을 통해
요청 단위로 세션을 생성/종료하는 구조를 지원한다.

설계 원칙:
- DB 연결 설정은 한 곳에서만 정의
- pool_pre_ping=True로 유휴 연결 오류 방지
- 운영은 PostgreSQL, 로컬/테스트는 SQLite도 허용

"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from course_market.core.config import settings


def build_engine(url: str, **kwargs):
    # SQLite는 요청마다 다른 스레드에서 같은 커넥션을 쓸 수 있어야 함
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True, **kwargs)


engine = build_engine(settings.DATABASE_URL)

# 요청 단위로 사용할 세션 팩토리
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)
