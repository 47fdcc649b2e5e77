"""다대다 참조 테이블 SQLAlchemy ORM 모델 정의.

Many-to-many reference tables linking users, groups, departments,
positions and organizations to roles. Both sides are stored as business
codes, scoped by org_code.

Tables:
    - user_role_ref: 사용자 ↔ 역할
    - user_group_ref: 사용자 ↔ 그룹
    - group_role_ref: 그룹 ↔ 역할
    - department_role_ref: 부서 ↔ 역할
    - position_role_ref: 직책 ↔ 역할
    - organization_role_ref: 조직 ↔ 역할
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import AuditMixin


class UserRoleRef(AuditMixin, Base):
    __tablename__ = "user_role_ref"

    user_code: Mapped[str | None] = mapped_column(String(64))
    role_code: Mapped[str | None] = mapped_column(String(64))
    org_code: Mapped[str | None] = mapped_column(String(64))


class UserGroupRef(AuditMixin, Base):
    __tablename__ = "user_group_ref"

    user_code: Mapped[str | None] = mapped_column(String(64))
    group_code: Mapped[str | None] = mapped_column(String(64))
    org_code: Mapped[str | None] = mapped_column(String(64))


class GroupRoleRef(AuditMixin, Base):
    __tablename__ = "group_role_ref"

    group_code: Mapped[str | None] = mapped_column(String(64))
    role_code: Mapped[str | None] = mapped_column(String(64))
    org_code: Mapped[str | None] = mapped_column(String(64))


class DepartmentRoleRef(AuditMixin, Base):
    __tablename__ = "department_role_ref"

    department_code: Mapped[str | None] = mapped_column(String(64))
    role_code: Mapped[str | None] = mapped_column(String(64))
    org_code: Mapped[str | None] = mapped_column(String(64))


class PositionRoleRef(AuditMixin, Base):
    __tablename__ = "position_role_ref"

    position_code: Mapped[str | None] = mapped_column(String(64))
    role_code: Mapped[str | None] = mapped_column(String(64))
    org_code: Mapped[str | None] = mapped_column(String(64))


class OrganizationRoleRef(AuditMixin, Base):
    __tablename__ = "organization_role_ref"

    org_code: Mapped[str | None] = mapped_column(String(64))
    role_code: Mapped[str | None] = mapped_column(String(64))
