# tests/helpers.py
import uuid
from sqlalchemy.orm import Session
from sqlalchemy import select

from course_market.core.security import get_password_hash
from course_market.models.category import Category, SubCategory
from course_market.models.course import Course
from course_market.models.user import User, Role

API = "/api/v1"


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def unique_email(prefix: str = "user") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:6]}@test.com"


def create_admin_in_db(db: Session, *, email: str, password: str) -> User:
    admin = User(
        first_name="Admin",
        last_name="User",
        email=email,
        password_hash=get_password_hash(password),
        role=Role.ADMIN,
        deleted_at=None,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


def create_catalog_in_db(db: Session) -> tuple[Category, SubCategory]:
    category = Category(name="Development")
    db.add(category)
    db.commit()
    db.refresh(category)

    sub_category = SubCategory(name="Web Development", category_id=category.id)
    db.add(sub_category)
    db.commit()
    db.refresh(sub_category)
    return category, sub_category


def register(client, *, email: str, password: str, first_name="Alice", last_name="Kim"):
    return client.post(
        f"{API}/users/register",
        json={
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "password": password,
        },
    )


def login(client, *, email: str, password: str):
    return client.post(f"{API}/users/login", json={"email": email, "password": password})


def admin_token(client, db: Session) -> str:
    email = unique_email("admin")
    password = "AdminPassw0rd!"
    create_admin_in_db(db, email=email, password=password)
    r = login(client, email=email, password=password)
    assert r.status_code == 200, r.text
    return r.json()["data"]["access_token"]


def course_payload(teacher_id, category: Category, sub_category: SubCategory, **overrides) -> dict:
    payload = {
        "title": "FastAPI from scratch",
        "teacher_id": str(teacher_id),
        "subtitle": "Build real APIs",
        "category_id": str(category.id),
        "sub_category_id": str(sub_category.id),
        "topic": "Python",
        "language": "en",
        "subtitle_languages": ["en", "fr"],
        "level": "BEGINNER",
        "duration": 540,
    }
    payload.update(overrides)
    return payload


def get_user(db: Session, user_id: str) -> User | None:
    db.expire_all()
    return db.scalar(select(User).where(User.id == uuid.UUID(user_id)))


def get_course(db: Session, course_id: str) -> Course | None:
    db.expire_all()
    return db.scalar(select(Course).where(Course.id == uuid.UUID(course_id)))
