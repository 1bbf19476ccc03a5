"""
category.py

강의 분류(Category / SubCategory) 모델.

분류 자체의 관리 API는 이 서비스 범위 밖이고,
강의(Course)가 참조하고 응답에 포함할 수 있도록 테이블만 정의한다.

"""

import uuid

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from course_market.db.base import Base
from course_market.models.mixins import SoftDeleteMixin, TimestampMixin


class Category(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "categories"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)


class SubCategory(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "sub_categories"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    category_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("categories.id"), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
