"""
services/store.py

엔티티 저장소 어댑터(Entity Store Adapter).

SQLAlchemy Session 위에 create / find_unique / find_many / update
네 가지 연산만 노출하는 얇은 계층이다.
세션 매니저와 라이프사이클 매니저는 이 클래스만 통해서 DB에 접근한다.

설계 원칙:
- 모든 조회/수정 조건에는 기본적으로 "deleted_at IS NULL" 조건이 AND로 붙음
- include_deleted=True 는 툼스톤 처리(삭제) 경로에서만 사용
- 각 쓰기 연산은 자체적으로 commit, 실패 시 rollback 후 도메인 예외로 변환
- HTTP / FastAPI 의존성 없음

"""

import logging
from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from course_market.core.errors import ConflictError, InternalError, ValidationError

logger = logging.getLogger("course_market.store")


class EntityStore:
    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def _scoped(model, criteria: Sequence[Any], include_deleted: bool) -> list:
        where = list(criteria)
        if not include_deleted:
            where.append(model.deleted_at.is_(None))
        return where

    def _commit(self, record, conflict_message: str = "Already exists") -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Integrity error on %s: %s", type(record).__name__, type(e.orig).__name__)
            # 참조 대상 없음(FK)과 유니크 중복은 서로 다른 오류로 구분
            if "foreign key" in str(e.orig).lower():
                raise ValidationError("Invalid reference") from e
            raise ConflictError(conflict_message) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Store failure on %s", type(record).__name__)
            raise InternalError(f"Database error: {type(e).__name__}") from e
        self.db.refresh(record)

    def create(self, model, data: Mapping[str, Any], *, conflict_message: str = "Already exists"):
        record = model(**data)
        record.deleted_at = None
        self.db.add(record)
        self._commit(record, conflict_message)
        return record

    def find_unique(self, model, *criteria, include_deleted: bool = False) -> Optional[Any]:
        stmt = select(model).where(*self._scoped(model, criteria, include_deleted))
        try:
            return self.db.scalars(stmt).unique().first()
        except SQLAlchemyError as e:
            logger.exception("Store read failure on %s", model.__name__)
            raise InternalError(f"Database error: {type(e).__name__}") from e

    def find_many(self, model, *criteria, include_deleted: bool = False, order_by=None) -> list:
        stmt = select(model).where(*self._scoped(model, criteria, include_deleted))
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        try:
            return list(self.db.scalars(stmt).unique().all())
        except SQLAlchemyError as e:
            logger.exception("Store read failure on %s", model.__name__)
            raise InternalError(f"Database error: {type(e).__name__}") from e

    def update(self, model, patch: Mapping[str, Any], *criteria, include_deleted: bool = False,
               conflict_message: str = "Already exists") -> Optional[Any]:
        """조건에 맞는 레코드 하나에 patch를 덮어쓴다. 대상이 없으면 None."""
        record = self.find_unique(model, *criteria, include_deleted=include_deleted)
        if record is None:
            return None
        for key, value in patch.items():
            setattr(record, key, value)
        self._commit(record, conflict_message)
        return record
