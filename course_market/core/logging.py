"""
logging.py

로깅 초기화 파일.

표준 logging 모듈을 사용하며, 애플리케이션 시작 시 한 번만 설정한다.
각 모듈은 logging.getLogger("course_market.<영역>") 형태의 이름으로 로거를 얻는다.

NOTE:
- 비밀번호, 토큰, 시크릿 값은 절대 로그에 남기지 않음 (사용자 id만 기록)

"""

import logging

from course_market.core.config import settings


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
