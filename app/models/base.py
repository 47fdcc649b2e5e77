"""공통 컬럼 믹스인: 모든 엔티티 테이블이 공유하는 컬럼 정의.

Shared column mixin for every entity table: numeric primary key,
soft-delete marker, and the four audit columns.
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, Integer, SmallInteger, text
from sqlalchemy.orm import Mapped, mapped_column

# SQLite는 INTEGER PRIMARY KEY만 자동 증가하므로 테스트 환경용 변형 타입 사용
# SQLite only autoincrements INTEGER PRIMARY KEY; BIGINT elsewhere
BigIntegerKey = BigInteger().with_variant(Integer, "sqlite")

# 소프트 삭제 마커 값: Soft-delete marker values
ACTIVE: int = 0
DELETED: int = -1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditMixin:
    """공통 컬럼 믹스인.

    Columns shared by every entity.

    Attributes:
        id: 자동 증가 기본키 (Autoincrement primary key)
        is_del: 소프트 삭제 마커: 0=활성, -1=삭제 (Soft-delete marker)
        create_time: 생성 일시 UTC (Creation timestamp)
        update_time: 수정 일시 UTC (Last update timestamp, auto-updated)
        create_by: 생성자 ID (Creating actor id)
        update_by: 수정자 ID (Last updating actor id)
    """

    id: Mapped[int] = mapped_column(BigIntegerKey, primary_key=True, autoincrement=True)
    is_del: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=ACTIVE, server_default=text("0"))
    create_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=_utcnow)
    update_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)
    create_by: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0, server_default=text("0"))
    update_by: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0, server_default=text("0"))
