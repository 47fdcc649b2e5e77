"""조직 구조 관련 SQLAlchemy ORM 모델 정의.

Organization-structure SQLAlchemy ORM model definitions.
Entities reference each other by business code (org_code, parent_code,
department_code) rather than by foreign key, so each table can be
maintained independently.

Tables:
    - organization: 조직 (Organizations, tree via parent_code)
    - department: 부서 (Departments under an organization)
    - position: 직책 (Positions under a department)
    - group: 사용자 그룹 (User groups under an organization)
"""

from datetime import date
from typing import Any

from sqlalchemy import JSON, Date, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import AuditMixin


class Organization(AuditMixin, Base):
    """조직 모델: 사업자 정보와 상위 조직 코드를 포함.

    Organization model with business registration info.

    Attributes:
        code: 조직 코드 (Organization business code)
        parent_code: 상위 조직 코드 (Parent organization code)
        name: 조직 이름 (Organization name)
        type: 조직 유형 (Organization type)
        uscc: 통일사회신용코드 (Unified social credit code)
        invalid_date: 만료일 (Expiry date)
        path: 트리 경로 (Materialized tree path)
    """

    __tablename__ = "organization"

    code: Mapped[str | None] = mapped_column(String(64))
    parent_code: Mapped[str | None] = mapped_column(String(64))
    name: Mapped[str | None] = mapped_column(String(128))
    type: Mapped[str | None] = mapped_column(String(16))
    contacts: Mapped[str | None] = mapped_column(String(64))
    cellphone: Mapped[str | None] = mapped_column(String(32))
    email: Mapped[str | None] = mapped_column(String(128))
    uscc: Mapped[str | None] = mapped_column(String(64))
    business_license: Mapped[str | None] = mapped_column(String(512))
    id_card_front: Mapped[str | None] = mapped_column(String(512))
    id_card_back: Mapped[str | None] = mapped_column(String(512))
    invalid_date: Mapped[date | None] = mapped_column(Date)
    status: Mapped[str | None] = mapped_column(String(16))
    extra: Mapped[Any | None] = mapped_column(JSON)
    remark: Mapped[str | None] = mapped_column(String(512))
    path: Mapped[str | None] = mapped_column(String(512))
    rec_sign: Mapped[str | None] = mapped_column(String(128))


class Department(AuditMixin, Base):
    """부서 모델 (Department under an organization)."""

    __tablename__ = "department"

    code: Mapped[str | None] = mapped_column(String(64))
    parent_code: Mapped[str | None] = mapped_column(String(64))
    name: Mapped[str | None] = mapped_column(String(128))
    description: Mapped[str | None] = mapped_column(String(512))
    org_code: Mapped[str | None] = mapped_column(String(64))
    extra: Mapped[Any | None] = mapped_column(JSON)
    remark: Mapped[str | None] = mapped_column(String(512))
    path: Mapped[str | None] = mapped_column(String(512))


class Position(AuditMixin, Base):
    """직책 모델 (Position under a department)."""

    __tablename__ = "position"

    code: Mapped[str | None] = mapped_column(String(64))
    parent_code: Mapped[str | None] = mapped_column(String(64))
    name: Mapped[str | None] = mapped_column(String(128))
    description: Mapped[str | None] = mapped_column(String(512))
    department_code: Mapped[str | None] = mapped_column(String(64))
    org_code: Mapped[str | None] = mapped_column(String(64))
    extra: Mapped[Any | None] = mapped_column(JSON)
    remark: Mapped[str | None] = mapped_column(String(512))
    path: Mapped[str | None] = mapped_column(String(512))


class Group(AuditMixin, Base):
    """사용자 그룹 모델 (User group under an organization)."""

    # "group"은 SQL 예약어: SQLAlchemy가 자동으로 인용 처리
    __tablename__ = "group"

    code: Mapped[str | None] = mapped_column(String(64))
    name: Mapped[str | None] = mapped_column(String(128))
    description: Mapped[str | None] = mapped_column(String(512))
    org_code: Mapped[str | None] = mapped_column(String(64))
    extra: Mapped[Any | None] = mapped_column(JSON)
    remark: Mapped[str | None] = mapped_column(String(512))
