"""
errors.py

도메인 예외(Exception) 정의 파일.

서비스 계층은 FastAPI에 의존하지 않으므로 HTTPException 대신
이 파일의 예외를 발생시키고, main.py의 예외 핸들러가
상태 코드 + 메시지 하나로 변환해서 응답한다.

설계 원칙:
- 메시지에는 비밀번호 / 토큰 값이 절대 포함되지 않음
- TokenInvalid는 토큰 검증 내부 전용 (경계에 닿기 전에 AuthError로 변환)
- 자동 재시도 없음, 모든 실패는 해당 요청에서 종료

"""


class AppError(Exception):
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# 입력값 누락/형식 오류
class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid input"


# 유니크 키 중복 (이메일 등)
class ConflictError(AppError):
    status_code = 400
    default_message = "Already exists"


# 인증 실패 - 메시지는 일부러 뭉뚱그려서 반환
class AuthError(AppError):
    status_code = 401
    default_message = "Not authenticated"


class ForbiddenError(AppError):
    status_code = 403
    default_message = "Forbidden"


# id가 살아있는(live) 엔티티로 조회되지 않음
class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


# 저장소 / 해셔 실패
class InternalError(AppError):
    status_code = 500
    default_message = "Something went wrong"


class TokenInvalid(Exception):
    """서명 불일치, 형식 오류, 만료, 토큰 종류 불일치를 모두 같은 예외로 표현."""
