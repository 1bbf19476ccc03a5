"""
services/users.py

회원(User) 라이프사이클 서비스.

공통 Soft Delete CRUD 위에 회원 전용 규칙만 얹는다.

- 이메일은 소문자로 정규화 후 저장
- 살아있는 회원 중 같은 이메일이 있으면 ConflictError
- 평문 password 는 저장 전에 password_hash 로 변환
- 역할(role) 기본값은 USER

"""

from typing import Any, Dict

from course_market.core.errors import ConflictError
from course_market.core.security import get_password_hash
from course_market.models.user import Role, User
from course_market.services.lifecycle import SoftDeleteCRUD


def normalize_email(email: Any) -> Any:
    return email.strip().lower() if isinstance(email, str) else email


class UserCRUD(SoftDeleteCRUD[User]):
    model = User
    label = "User"
    required_fields = ("first_name", "last_name", "email", "password")
    enum_fields = {"role": Role}
    conflict_message = "User already exists"
    mutable_fields = ("first_name", "last_name", "email", "password", "role")

    def find_live_by_email(self, email: str) -> User | None:
        return self.store.find_unique(User, User.email == normalize_email(email))

    def before_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        email = normalize_email(data["email"])
        if self.find_live_by_email(email):
            raise ConflictError("User already exists")

        return {
            "first_name": data["first_name"],
            "last_name": data["last_name"],
            "email": email,
            "password_hash": get_password_hash(data["password"]),
            "role": data.get("role") or Role.USER,
        }

    def before_update(self, entity: User, patch: Dict[str, Any]) -> Dict[str, Any]:
        if "email" in patch:
            patch["email"] = normalize_email(patch["email"])
            other = self.find_live_by_email(patch["email"])
            if other is not None and other.id != entity.id:
                raise ConflictError("User already exists")

        # 비밀번호 변경은 해시로 바꿔서 저장
        if "password" in patch:
            patch["password_hash"] = get_password_hash(patch.pop("password"))

        return patch
