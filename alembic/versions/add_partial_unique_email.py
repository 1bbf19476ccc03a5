"""partial unique email for live users

Revision ID: 8f2d4a6e51c0
Revises: 3b9e1c07d2a4
Create Date: 2026-10-19 10:31:05.552917

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8f2d4a6e51c0'
down_revision: Union[str, Sequence[str], None] = '3b9e1c07d2a4'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    # 살아있는 회원(deleted_at IS NULL)끼리만 email unique
    # 탈퇴한 회원 레코드는 감사용으로 남기고 같은 이메일 재가입 허용
    op.create_index(
        "uq_users_email_live",
        "users",
        ["email"],
        unique=True,
        postgresql_where=sa.text("deleted_at IS NULL"),
        sqlite_where=sa.text("deleted_at IS NULL"),
    )


def downgrade():
    op.drop_index("uq_users_email_live", table_name="users")
