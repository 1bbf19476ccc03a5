"""
courses.py

강의(Course) API 모음.

- 조회(목록 / 상세)는 누구나 가능
- 생성 / 수정 / 삭제는 로그인 회원만 가능
- 삭제는 Soft Delete, 삭제된 강의는 이후 조회에서 404

"""

import uuid

from fastapi import APIRouter, Depends, status

from course_market.core.deps import get_current_user, get_store
from course_market.models.course import Course
from course_market.models.user import User
from course_market.schemas.course import CourseCreateRequest, CourseResponse, CourseUpdateRequest
from course_market.services.courses import CourseCRUD
from course_market.services.store import EntityStore

router = APIRouter(prefix="/courses", tags=["courses"])


def _course_body(course: Course) -> dict:
    return CourseResponse.model_validate(course).model_dump(mode="json")


@router.post("", status_code=status.HTTP_201_CREATED)
def create_course(
    data: CourseCreateRequest,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    course = CourseCRUD(store).create(data.model_dump())
    return {
        "message": "Course created successfully",
        "data": _course_body(course),
    }


@router.get("")
def list_courses(store: EntityStore = Depends(get_store)):
    return {"data": [_course_body(c) for c in CourseCRUD(store).get_all()]}


@router.get("/{course_id}")
def get_course(course_id: uuid.UUID, store: EntityStore = Depends(get_store)):
    return {"data": _course_body(CourseCRUD(store).get_by_id(course_id))}


@router.put("/{course_id}")
def update_course(
    course_id: uuid.UUID,
    data: CourseUpdateRequest,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    patch = data.model_dump(exclude_unset=True, exclude_none=True)
    course = CourseCRUD(store).update(course_id, patch)
    return {"data": _course_body(course)}


@router.delete("/{course_id}", status_code=status.HTTP_202_ACCEPTED)
def delete_course(
    course_id: uuid.UUID,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    CourseCRUD(store).delete(course_id)
    return {
        "message": "Delete successfully",
        "data": {"id": str(course_id)},
    }
