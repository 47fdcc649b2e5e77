"""SQLAlchemy ORM 모델 패키지: 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package: Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for ``create_all`` in tests and for
the entity registry.

Modules:
    base: 공통 컬럼 믹스인 (id, is_del, audit columns)
    user: 사용자, 사용자 상세, 위챗 정보 (User, UserInfo, UserWechatInfo)
    organization: 조직, 부서, 직책, 그룹 (Organization, Department, Position, Group)
    permission: 역할, 권한, 시스템 설정 (Role, Permission, SystemConfig)
    refs: 역할/그룹 참조 테이블 (Role and group reference tables)
"""

from app.models.user import User, UserInfo, UserWechatInfo
from app.models.organization import Organization, Department, Position, Group
from app.models.permission import Role, Permission, SystemConfig
from app.models.refs import (
    UserRoleRef, UserGroupRef, GroupRoleRef,
    DepartmentRoleRef, PositionRoleRef, OrganizationRoleRef,
)

__all__ = [
    "User", "UserInfo", "UserWechatInfo",
    "Organization", "Department", "Position", "Group",
    "Role", "Permission", "SystemConfig",
    "UserRoleRef", "UserGroupRef", "GroupRoleRef",
    "DepartmentRoleRef", "PositionRoleRef", "OrganizationRoleRef",
]
