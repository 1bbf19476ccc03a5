from typing import Generator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from course_market.core.config import settings
from course_market.core.errors import TokenInvalid
from course_market.core.security import TokenService
from course_market.db.session import SessionLocal
from course_market.models.user import Role, User
from course_market.services.lifecycle import as_uuid
from course_market.services.store import EntityStore

# Swagger Authorize에서 "Bearer 토큰" 입력받는 스키마
bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> EntityStore:
    return EntityStore(db)


def get_token_service() -> TokenService:
    return TokenService(settings.token_config())


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    cred: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    store: EntityStore = Depends(get_store),
    tokens: TokenService = Depends(get_token_service),
) -> User:
    if cred is None:
        raise _unauthorized("Not authenticated")

    # access 토큰만 허용 (refresh 토큰은 시크릿/type 둘 다 달라서 여기서 막힘)
    try:
        claims = tokens.verify_access_token(cred.credentials)
    except TokenInvalid:
        raise _unauthorized("Could not validate credentials")

    user_id = as_uuid(claims.subject)
    if user_id is None:
        raise _unauthorized("Could not validate credentials")

    user = store.find_unique(User, User.id == user_id)
    if not user:
        raise _unauthorized("User not found")

    return user


def require_role(role: Role):
    def _checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role != role:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires role {role.value}",
            )
        return current_user
    return _checker

get_current_admin = require_role(Role.ADMIN)
