import uuid
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

from course_market.models.course import Level


class CourseCreateRequest(BaseModel):
    """필수값 / level / 배열 검사는 CourseCRUD에서 하므로 여기서는 느슨하게 받는다."""

    title: Optional[str] = None
    teacher_id: Optional[uuid.UUID] = None
    subtitle: Optional[str] = None
    category_id: Optional[uuid.UUID] = None
    sub_category_id: Optional[uuid.UUID] = None
    topic: Optional[str] = None
    language: Optional[str] = None
    subtitle_languages: Any = None
    level: Optional[str] = None
    duration: Optional[int] = None


class CourseUpdateRequest(BaseModel):
    title: Optional[str] = None
    teacher_id: Optional[uuid.UUID] = None
    subtitle: Optional[str] = None
    category_id: Optional[uuid.UUID] = None
    sub_category_id: Optional[uuid.UUID] = None
    topic: Optional[str] = None
    language: Optional[str] = None
    subtitle_languages: Optional[List[str]] = None
    level: Optional[Level] = None
    duration: Optional[int] = None


class CategoryResponse(BaseModel):
    id: uuid.UUID
    name: str

    model_config = ConfigDict(from_attributes=True)


class SubCategoryResponse(BaseModel):
    id: uuid.UUID
    category_id: uuid.UUID
    name: str

    model_config = ConfigDict(from_attributes=True)


class CourseResponse(BaseModel):
    id: uuid.UUID
    teacher_id: uuid.UUID
    title: str
    subtitle: str
    topic: str
    language: str
    subtitle_languages: List[str]
    level: Level
    duration: int
    category: CategoryResponse
    sub_category: SubCategoryResponse
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
