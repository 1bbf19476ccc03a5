"""

ADMIN 초기 계정 생성 스크립트.

- 서버 최초 세팅 시 단 한 번 실행하는 용도
- .env에 정의된 ADMIN_* 환경 변수를 읽어
  ADMIN 계정을 생성한다.
- 이미 살아있는 ADMIN 계정이 존재하면 생성하지 않고 종료한다.

사용 목적:
- 회원 관리 API(/api/v1/users)에 접근할 수 있는
  첫 관리자 계정을 안전하게 초기화하기 위함

사용 방법
- 가상환경 접속
- (.venv) ~\backend~$ python -m scripts.create_admin

"""

import os
from dotenv import load_dotenv
load_dotenv()

from course_market.db.session import SessionLocal
from course_market.models.user import User, Role
from course_market.services.store import EntityStore
from course_market.services.users import UserCRUD



def main():
    db = SessionLocal()
    try:
        store = EntityStore(db)
        exists = store.find_unique(User, User.role == Role.ADMIN)
        if exists:
            print("✅ ADMIN already exists. Skip creation.")
            return

        user = UserCRUD(store).create({
            "email": os.environ["ADMIN_EMAIL"],
            "password": os.environ["ADMIN_PASSWORD"],
            "first_name": os.environ.get("ADMIN_FIRST_NAME", "Admin"),
            "last_name": os.environ.get("ADMIN_LAST_NAME", "User"),
            "role": Role.ADMIN,
        })

        print(f"🚀 ADMIN created: {user.email}")

    finally:
        db.close()


if __name__ == "__main__":
    main()
