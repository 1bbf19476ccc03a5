"""
services/lifecycle.py

Soft Delete 기반 공통 CRUD(라이프사이클 매니저).

엔티티 종류마다 같은 패턴을 반복하지 않도록
한 번만 구현하고, 엔티티별 클래스는 검증 규칙과 훅만 정의한다.

주요 기능:
- create     : 필수값 / enum / 배열(원소 타입 포함) / 양수 검증 후 저장 (deleted_at=None)
- get_by_id  : 살아있는 엔티티만 조회, 툼스톤은 "없는 것"과 동일하게 NotFound
- get_all    : 살아있는 엔티티 전체
- update     : 살아있는 엔티티에 부분 수정 (배열 / 양수 형태는 검사, enum 재검증은 하지 않음)
- delete     : deleted_at 을 현재 시각으로 설정 (Hard Delete 없음)

NOTE:
- delete 는 liveness를 확인하지 않으므로 이미 삭제된 엔티티를 다시 삭제해도 성공
- update / delete 가 동시에 들어오면 저장소에 마지막으로 반영된 쪽이 남음 (락 없음)

"""

import uuid
from enum import Enum
from typing import Any, ClassVar, Dict, Generic, Mapping, Tuple, Type, TypeVar

from course_market.core.errors import NotFound, ValidationError
from course_market.models.mixins import utcnow
from course_market.services.store import EntityStore

ModelT = TypeVar("ModelT")


def as_uuid(value: Any) -> uuid.UUID | None:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


class SoftDeleteCRUD(Generic[ModelT]):
    """엔티티 하나에 대한 Soft Delete CRUD.

    하위 클래스에서 지정하는 값:
    - model            : ORM 모델 (id, deleted_at 컬럼 필수)
    - label            : 에러 메시지에 쓰이는 이름
    - required_fields  : create 시 반드시 있어야 하는 필드
    - enum_fields      : create 시 허용 값 집합을 검사할 필드 → Enum 클래스
    - sequence_fields  : 배열(list/tuple)이어야 하는 필드 → 원소 타입
    - positive_fields  : 양의 정수여야 하는 필드
    - mutable_fields   : update 로 바꿀 수 있는 필드
    - conflict_message : 유니크 제약 위반 시 메시지
    """

    model: ClassVar[Type]
    label: ClassVar[str] = "Record"
    required_fields: ClassVar[Tuple[str, ...]] = ()
    enum_fields: ClassVar[Dict[str, Type[Enum]]] = {}
    sequence_fields: ClassVar[Dict[str, type]] = {}
    positive_fields: ClassVar[Tuple[str, ...]] = ()
    mutable_fields: ClassVar[Tuple[str, ...]] = ()
    conflict_message: ClassVar[str] = "Already exists"

    def __init__(self, store: EntityStore):
        self.store = store

    # -- 검증 / 훅 -------------------------------------------------------

    def validate_shape(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """배열 / 양수 필드 형태 검사. create 와 update 모두 적용 (저장 후 직렬화 실패 방지)."""
        for field, item_type in self.sequence_fields.items():
            if field not in data:
                continue
            value = data[field]
            if not isinstance(value, (list, tuple)):
                raise ValidationError(f"{field} must be an array")
            if not all(isinstance(item, item_type) for item in value):
                raise ValidationError(f"{field} must contain only {item_type.__name__} values")
            data[field] = list(value)

        for field in self.positive_fields:
            if field not in data:
                continue
            value = data[field]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValidationError(f"{field} must be a positive integer")

        return data

    def validate_create(self, attributes: Mapping[str, Any]) -> Dict[str, Any]:
        data = dict(attributes)

        if any(is_missing(data.get(f)) for f in self.required_fields):
            raise ValidationError("All fields are required")

        for field, enum_cls in self.enum_fields.items():
            value = data.get(field)
            if value is None:
                continue
            allowed = {e.value for e in enum_cls}
            raw = value.value if isinstance(value, Enum) else value
            if raw not in allowed:
                raise ValidationError(f"Invalid {field} value")
            data[field] = enum_cls(raw)

        return self.validate_shape(data)

    def before_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return data

    def before_update(self, entity: ModelT, patch: Dict[str, Any]) -> Dict[str, Any]:
        return patch

    def not_found(self) -> NotFound:
        return NotFound(f"{self.label} not found")

    # -- CRUD -------------------------------------------------------------

    def create(self, attributes: Mapping[str, Any]) -> ModelT:
        data = self.before_create(self.validate_create(attributes))
        return self.store.create(self.model, data, conflict_message=self.conflict_message)

    def get_by_id(self, entity_id: Any) -> ModelT:
        pk = as_uuid(entity_id)
        if pk is None:
            raise self.not_found()
        entity = self.store.find_unique(self.model, self.model.id == pk)
        if entity is None:
            raise self.not_found()
        return entity

    def get_all(self) -> list:
        return self.store.find_many(self.model, order_by=self.model.created_at)

    def update(self, entity_id: Any, partial: Mapping[str, Any]) -> ModelT:
        unknown = [k for k in partial if k not in self.mutable_fields]
        if unknown:
            raise ValidationError(f"Unknown field: {unknown[0]}")

        entity = self.get_by_id(entity_id)
        patch = self.before_update(entity, self.validate_shape(dict(partial)))
        updated = self.store.update(
            self.model,
            patch,
            self.model.id == entity.id,
            conflict_message=self.conflict_message,
        )
        # get_by_id 이후 다른 요청이 먼저 삭제한 경우
        if updated is None:
            raise self.not_found()
        return updated

    def delete(self, entity_id: Any) -> None:
        pk = as_uuid(entity_id)
        if pk is None:
            raise self.not_found()
        deleted = self.store.update(
            self.model,
            {"deleted_at": utcnow()},
            self.model.id == pk,
            include_deleted=True,
        )
        if deleted is None:
            raise self.not_found()
