import uuid
from pydantic import BaseModel, EmailStr


# 필수값 누락은 서비스 계층에서 "All fields are required" 로 통일해서 검사
class RegisterRequest(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    email: EmailStr | None = None
    password: str | None = None

class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None

class AccessTokenRequest(BaseModel):
    refresh_token: str | None = None

class SessionResponse(BaseModel):
    id: uuid.UUID
    name: str
    email: str
    role: str
    access_token: str
    refresh_token: str
    token_type: str = "bearer"

class AccessTokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
