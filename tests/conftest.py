import os

# 설정 import 전에 테스트용 환경 변수 세팅 (.env 없어도 동작하도록)
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-access-secret")
os.environ.setdefault("REFRESH_SECRET_KEY", "test-refresh-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from course_market.main import app as fastapi_app
from course_market.core.config import settings
from course_market.core.deps import get_db
from course_market.db.base import Base
from course_market.db.session import build_engine
from course_market.services.store import EntityStore

# ✅ 모델 import (Base.metadata에 테이블 등록)
import course_market.models.user  # noqa: F401
import course_market.models.course  # noqa: F401


TEST_DB_URL = settings.TEST_DATABASE_URL or "sqlite://"

if TEST_DB_URL.startswith("sqlite"):
    # in-memory SQLite를 TestClient 워커 스레드와 공유하려면 커넥션 하나만 써야 함
    engine = build_engine(TEST_DB_URL, poolclass=StaticPool)
else:
    engine = build_engine(TEST_DB_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """테스트 전체 시작/종료 때만 스키마 생성/삭제"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_tables():
    """각 테스트마다 데이터 초기화 (테이블은 유지, row만 삭제)"""
    yield
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture()
def db_session():
    """테스트에서 직접 DB 조작할 때 쓰는 세션"""
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    finally:
        session.close()


@pytest.fixture()
def store(db_session):
    return EntityStore(db_session)


@pytest.fixture()
def client():
    fastapi_app.dependency_overrides[get_db] = override_get_db
    with TestClient(fastapi_app) as c:
        yield c
    fastapi_app.dependency_overrides.clear()
