"""
mixins.py

여러 모델이 공통으로 쓰는 컬럼 묶음.

- created_at : 생성 시각 (UTC)
- deleted_at : 툼스톤(Soft Delete) 시각, None이면 살아있는(live) 레코드

"""

import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class TimestampMixin:
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )


class SoftDeleteMixin:
    deleted_at: Mapped[datetime.datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )

    @property
    def is_live(self) -> bool:
        return self.deleted_at is None
