"""
user.py

사용자(User) 및 권한(Role) 모델 정의 파일.

이 파일은 회원의 기본 정보와
권한(Role), 탈퇴 상태(Soft Delete), 인증 관련 정보를 관리한다.

모든 인증, 권한, 강의 관리 기능의 기준이 되는 핵심 모델이다.

"""

import uuid
from enum import Enum

from sqlalchemy import Index, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from course_market.db.base import Base
from course_market.models.mixins import SoftDeleteMixin, TimestampMixin



"""
사용자 권한(Role) 정의

- USER  : 일반 회원 (가입 시 기본값)
- ADMIN : 관리자

"""

class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"



"""
사용자(User) 모델

- email 은 살아있는(deleted_at IS NULL) 회원 사이에서만 유일
  → 탈퇴한 회원과 같은 이메일로 재가입 가능 (partial unique index)
- role을 통해 접근 권한 제어
- deleted_at 으로 Soft Delete 지원 (Hard Delete 하지 않음)

"""

class User(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "users"
    __table_args__ = (
        Index(
            "uq_users_email_live",
            "email",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)

    email: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    role: Mapped[Role] = mapped_column(default=Role.USER)

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"
