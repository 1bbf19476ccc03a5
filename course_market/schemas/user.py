from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr

from course_market.models.user import Role


# 🔹 관리자 회원 생성 요청용
class UserCreateRequest(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    email: EmailStr | None = None
    password: str | None = None
    role: Role = Role.USER


# 🔹 부분 수정 요청용 (보낸 필드만 반영)
class UserUpdateRequest(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    email: EmailStr | None = None
    password: str | None = None
    role: Role | None = None


# 🔹 유저 응답용 (password_hash 는 절대 포함하지 않음)
class UserResponse(BaseModel):
    id: UUID
    first_name: str
    last_name: str
    name: str
    email: str
    role: Role
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
