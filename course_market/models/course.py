"""
course.py

강의(Course) 모델 정의 파일.

- teacher_id      : 강의를 개설한 회원(User)
- category_id     : 대분류
- sub_category_id : 소분류
- subtitle_languages : 자막 언어 목록 (JSON 배열)
- level           : BEGINNER / INTERMEDIATE / ADVANCED
- duration        : 총 강의 시간 (분)
- deleted_at      : Soft Delete 시각, None이면 노출 대상

"""

import datetime
import uuid
from enum import Enum

from sqlalchemy import DateTime, Enum as SAEnum, ForeignKey, Integer, JSON, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from course_market.db.base import Base
from course_market.models.category import Category, SubCategory
from course_market.models.mixins import SoftDeleteMixin, TimestampMixin, utcnow


class Level(str, Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


class Course(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "courses"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    teacher_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    category_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("categories.id"), nullable=False)
    sub_category_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("sub_categories.id"), nullable=False)

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    subtitle: Mapped[str] = mapped_column(String(255), nullable=False)
    topic: Mapped[str] = mapped_column(String(100), nullable=False)
    language: Mapped[str] = mapped_column(String(50), nullable=False)
    subtitle_languages: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    level: Mapped[Level] = mapped_column(SAEnum(Level, name="course_level"), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)

    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    category: Mapped[Category] = relationship(lazy="joined")
    sub_category: Mapped[SubCategory] = relationship(lazy="joined")
