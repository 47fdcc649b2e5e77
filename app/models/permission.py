"""Role, Permission, SystemConfig SQLAlchemy ORM 모델 정의.

역할·권한 정의 테이블과 시스템 설정 테이블.

Tables:
    - role: 역할 (application 단위, parent_code로 계층 구성)
    - permission: 권한 (메뉴/버튼/API 리소스, parent_uuid로 계층 구성)
    - system_config: 키-값 시스템 설정
"""

from typing import Any

from sqlalchemy import JSON, Integer, SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import AuditMixin


class Role(AuditMixin, Base):
    """역할 모델.

    Attributes:
        code: 역할 코드
        parent_code: 상위 역할 코드
        name: 역할 이름
        application: 소속 애플리케이션
        org_code: 소속 조직 코드
        role_type: 역할 유형 (숫자 코드)
    """

    __tablename__ = "role"

    code: Mapped[str | None] = mapped_column(String(64))
    parent_code: Mapped[str | None] = mapped_column(String(64))
    name: Mapped[str | None] = mapped_column(String(128))
    application: Mapped[str | None] = mapped_column(String(64))
    org_code: Mapped[str | None] = mapped_column(String(64))
    role_type: Mapped[int | None] = mapped_column(SmallInteger)
    description: Mapped[str | None] = mapped_column(String(512))
    extra: Mapped[Any | None] = mapped_column(JSON)
    remark: Mapped[str | None] = mapped_column(String(512))
    path: Mapped[str | None] = mapped_column(String(512))


class Permission(AuditMixin, Base):
    """권한 모델.

    Attributes:
        code: 권한 코드 (e.g. "user:read")
        parent_uuid: 상위 권한 식별자
        name: 권한 이름
        application: 소속 애플리케이션
        permission_type: 권한 유형 (menu / button / api)
        uri: 리소스 URI
        method: HTTP 메서드
        sort: 정렬 순서
    """

    __tablename__ = "permission"

    code: Mapped[str | None] = mapped_column(String(128))
    parent_uuid: Mapped[str | None] = mapped_column(String(64))
    name: Mapped[str | None] = mapped_column(String(128))
    application: Mapped[str | None] = mapped_column(String(64))
    permission_type: Mapped[str | None] = mapped_column(String(16))
    uri: Mapped[str | None] = mapped_column(String(512))
    method: Mapped[str | None] = mapped_column(String(16))
    sort: Mapped[int | None] = mapped_column(Integer, default=0)
    description: Mapped[str | None] = mapped_column(String(512))
    extra: Mapped[Any | None] = mapped_column(JSON)
    remark: Mapped[str | None] = mapped_column(String(512))


class SystemConfig(AuditMixin, Base):
    """시스템 설정 모델: config_key 단위 키-값 저장."""

    __tablename__ = "system_config"

    config_key: Mapped[str | None] = mapped_column(String(128))
    config_value: Mapped[str | None] = mapped_column(Text)
    config_type: Mapped[str | None] = mapped_column(String(32))
    description: Mapped[str | None] = mapped_column(String(512))
    remark: Mapped[str | None] = mapped_column(String(512))
