"""
users.py

회원(User) 조회 / 관리 API 모음.

주요 기능:
- 본인 프로필 조회 (로그인 회원)
- 회원 목록 / 상세 조회, 생성, 수정, 삭제 (관리자 전용)

설계 원칙:
- 삭제는 Soft Delete (deleted_at 설정), 삭제된 회원은 모든 조회에서 제외
- 응답에는 password_hash 를 포함하지 않음

관련 파일:
- course_market.services.users   : UserCRUD
- course_market.core.deps        : get_current_user / get_current_admin
"""

import uuid

from fastapi import APIRouter, Depends, status

from course_market.core.deps import get_current_admin, get_current_user, get_store
from course_market.models.user import User
from course_market.schemas.user import UserCreateRequest, UserResponse, UserUpdateRequest
from course_market.services.store import EntityStore
from course_market.services.users import UserCRUD

router = APIRouter(prefix="/users", tags=["users"])


def _user_body(user: User) -> dict:
    return UserResponse.model_validate(user).model_dump(mode="json")


@router.get("/profile")
def profile(current_user: User = Depends(get_current_user)):
    return {"data": _user_body(current_user)}


@router.get("")
def list_users(
    store: EntityStore = Depends(get_store),
    admin: User = Depends(get_current_admin),
):
    users = UserCRUD(store).get_all()
    return {"data": [_user_body(u) for u in users]}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(
    data: UserCreateRequest,
    store: EntityStore = Depends(get_store),
    admin: User = Depends(get_current_admin),
):
    user = UserCRUD(store).create(data.model_dump())
    return {
        "message": "User created",
        "data": _user_body(user),
    }


@router.get("/{user_id}")
def get_user(
    user_id: uuid.UUID,
    store: EntityStore = Depends(get_store),
    admin: User = Depends(get_current_admin),
):
    return {"data": _user_body(UserCRUD(store).get_by_id(user_id))}


@router.put("/{user_id}")
def update_user(
    user_id: uuid.UUID,
    data: UserUpdateRequest,
    store: EntityStore = Depends(get_store),
    admin: User = Depends(get_current_admin),
):
    patch = data.model_dump(exclude_unset=True, exclude_none=True)
    user = UserCRUD(store).update(user_id, patch)
    return {"data": _user_body(user)}


@router.delete("/{user_id}", status_code=status.HTTP_202_ACCEPTED)
def delete_user(
    user_id: uuid.UUID,
    store: EntityStore = Depends(get_store),
    admin: User = Depends(get_current_admin),
):
    UserCRUD(store).delete(user_id)
    return {
        "message": "User removed",
        "data": {"id": str(user_id)},
    }
