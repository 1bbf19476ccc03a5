"""
services/courses.py

강의(Course) 라이프사이클 서비스.

필수 필드 10개, level enum, subtitle_languages 배열, duration 양수 검사는 공통 CRUD가 처리하고
여기서는 참조 대상(강사 / 대분류 / 소분류)이 실제로 살아있는지만 확인한다.
수정 시에도 같은 참조 검사를 하며, 대분류 / 소분류 중 하나만 바뀌어도
기존 값과 합쳐서 소속 관계를 다시 확인한다.

"""

from typing import Any, Dict

from course_market.core.errors import ValidationError
from course_market.models.category import Category, SubCategory
from course_market.models.course import Course, Level
from course_market.models.user import User
from course_market.services.lifecycle import SoftDeleteCRUD, as_uuid


class CourseCRUD(SoftDeleteCRUD[Course]):
    model = Course
    label = "Course"
    required_fields = (
        "title",
        "teacher_id",
        "subtitle",
        "category_id",
        "sub_category_id",
        "topic",
        "language",
        "subtitle_languages",
        "level",
        "duration",
    )
    enum_fields = {"level": Level}
    sequence_fields = {"subtitle_languages": str}
    positive_fields = ("duration",)
    mutable_fields = (
        "title",
        "teacher_id",
        "subtitle",
        "category_id",
        "sub_category_id",
        "topic",
        "language",
        "subtitle_languages",
        "level",
        "duration",
    )

    def _require(self, model, value: Any, field: str):
        pk = as_uuid(value)
        row = self.store.find_unique(model, model.id == pk) if pk else None
        if row is None:
            raise ValidationError(f"Invalid {field}")
        return row

    def before_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        teacher = self._require(User, data["teacher_id"], "teacher_id")
        category = self._require(Category, data["category_id"], "category_id")
        sub_category = self._require(SubCategory, data["sub_category_id"], "sub_category_id")
        if sub_category.category_id != category.id:
            raise ValidationError("Subcategory does not belong to category")

        return {
            "teacher_id": teacher.id,
            "category_id": category.id,
            "sub_category_id": sub_category.id,
            "title": data["title"],
            "subtitle": data["subtitle"],
            "topic": data["topic"],
            "language": data["language"],
            "subtitle_languages": data["subtitle_languages"],
            "level": data["level"],
            "duration": data["duration"],
        }

    def before_update(self, entity: Course, patch: Dict[str, Any]) -> Dict[str, Any]:
        if "teacher_id" in patch:
            patch["teacher_id"] = self._require(User, patch["teacher_id"], "teacher_id").id

        if "category_id" in patch or "sub_category_id" in patch:
            category = self._require(
                Category, patch.get("category_id", entity.category_id), "category_id"
            )
            sub_category = self._require(
                SubCategory, patch.get("sub_category_id", entity.sub_category_id), "sub_category_id"
            )
            if sub_category.category_id != category.id:
                raise ValidationError("Subcategory does not belong to category")
            patch["category_id"] = category.id
            patch["sub_category_id"] = sub_category.id

        return patch
