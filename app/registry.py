"""엔티티 레지스트리: 모든 관리 대상 엔티티의 디스크립터 목록.

Entity registry. Each entry below declares one managed entity; the router
package mounts one CRUD router per entry, so adding an entity means adding
a model, its schemas, and one line here.
"""

from app.models import (
    Department,
    DepartmentRoleRef,
    Group,
    GroupRoleRef,
    Organization,
    OrganizationRoleRef,
    Permission,
    Position,
    PositionRoleRef,
    Role,
    SystemConfig,
    User,
    UserGroupRef,
    UserInfo,
    UserRoleRef,
    UserWechatInfo,
)
from app.repositories.descriptor import EntityDescriptor
from app.schemas import organization as org_schemas
from app.schemas import permission as perm_schemas
from app.schemas import refs as ref_schemas
from app.schemas import user as user_schemas

# === 사용자 (Users) ===
USER = EntityDescriptor(
    slug="user",
    model=User,
    condition=user_schemas.UserCondition,
    dto=user_schemas.UserDto,
    vo=user_schemas.UserVo,
    like_fields=("real_name",),
    title="User",
)
USER_INFO = EntityDescriptor(
    slug="userInfo",
    model=UserInfo,
    condition=user_schemas.UserInfoCondition,
    dto=user_schemas.UserInfoDto,
    vo=user_schemas.UserInfoVo,
    like_fields=("real_name", "nick_name"),
    title="User Info",
)
USER_WECHAT_INFO = EntityDescriptor(
    slug="userWechatInfo",
    model=UserWechatInfo,
    condition=user_schemas.UserWechatInfoCondition,
    dto=user_schemas.UserWechatInfoDto,
    vo=user_schemas.UserWechatInfoVo,
    like_fields=("nickname",),
    title="User Wechat Info",
)

# === 조직 구조 (Organization structure) ===
ORGANIZATION = EntityDescriptor(
    slug="organization",
    model=Organization,
    condition=org_schemas.OrganizationCondition,
    dto=org_schemas.OrganizationDto,
    vo=org_schemas.OrganizationVo,
    like_fields=("name",),
    title="Organization",
)
DEPARTMENT = EntityDescriptor(
    slug="department",
    model=Department,
    condition=org_schemas.DepartmentCondition,
    dto=org_schemas.DepartmentDto,
    vo=org_schemas.DepartmentVo,
    like_fields=("name",),
    title="Department",
)
POSITION = EntityDescriptor(
    slug="position",
    model=Position,
    condition=org_schemas.PositionCondition,
    dto=org_schemas.PositionDto,
    vo=org_schemas.PositionVo,
    like_fields=("name",),
    title="Position",
)
GROUP = EntityDescriptor(
    slug="group",
    model=Group,
    condition=org_schemas.GroupCondition,
    dto=org_schemas.GroupDto,
    vo=org_schemas.GroupVo,
    like_fields=("name",),
    title="Group",
)

# === 권한 (Access control) ===
ROLE = EntityDescriptor(
    slug="role",
    model=Role,
    condition=perm_schemas.RoleCondition,
    dto=perm_schemas.RoleDto,
    vo=perm_schemas.RoleVo,
    like_fields=("name",),
    title="Role",
)
PERMISSION = EntityDescriptor(
    slug="permission",
    model=Permission,
    condition=perm_schemas.PermissionCondition,
    dto=perm_schemas.PermissionDto,
    vo=perm_schemas.PermissionVo,
    like_fields=("name",),
    title="Permission",
)
SYSTEM_CONFIG = EntityDescriptor(
    slug="systemConfig",
    model=SystemConfig,
    condition=perm_schemas.SystemConfigCondition,
    dto=perm_schemas.SystemConfigDto,
    vo=perm_schemas.SystemConfigVo,
    title="System Config",
)

# === 참조 테이블 (Reference tables): 모든 필드 완전 일치 ===
USER_ROLE_REF = EntityDescriptor(
    slug="userRoleRef",
    model=UserRoleRef,
    condition=ref_schemas.UserRoleRefCondition,
    dto=ref_schemas.UserRoleRefDto,
    vo=ref_schemas.UserRoleRefVo,
    title="User Role Ref",
)
USER_GROUP_REF = EntityDescriptor(
    slug="userGroupRef",
    model=UserGroupRef,
    condition=ref_schemas.UserGroupRefCondition,
    dto=ref_schemas.UserGroupRefDto,
    vo=ref_schemas.UserGroupRefVo,
    title="User Group Ref",
)
GROUP_ROLE_REF = EntityDescriptor(
    slug="groupRoleRef",
    model=GroupRoleRef,
    condition=ref_schemas.GroupRoleRefCondition,
    dto=ref_schemas.GroupRoleRefDto,
    vo=ref_schemas.GroupRoleRefVo,
    title="Group Role Ref",
)
DEPARTMENT_ROLE_REF = EntityDescriptor(
    slug="departmentRoleRef",
    model=DepartmentRoleRef,
    condition=ref_schemas.DepartmentRoleRefCondition,
    dto=ref_schemas.DepartmentRoleRefDto,
    vo=ref_schemas.DepartmentRoleRefVo,
    title="Department Role Ref",
)
POSITION_ROLE_REF = EntityDescriptor(
    slug="positionRoleRef",
    model=PositionRoleRef,
    condition=ref_schemas.PositionRoleRefCondition,
    dto=ref_schemas.PositionRoleRefDto,
    vo=ref_schemas.PositionRoleRefVo,
    title="Position Role Ref",
)
ORGANIZATION_ROLE_REF = EntityDescriptor(
    slug="organizationRoleRef",
    model=OrganizationRoleRef,
    condition=ref_schemas.OrganizationRoleRefCondition,
    dto=ref_schemas.OrganizationRoleRefDto,
    vo=ref_schemas.OrganizationRoleRefVo,
    title="Organization Role Ref",
)

ENTITIES: tuple[EntityDescriptor, ...] = (
    USER,
    USER_INFO,
    USER_WECHAT_INFO,
    ORGANIZATION,
    DEPARTMENT,
    POSITION,
    GROUP,
    ROLE,
    PERMISSION,
    SYSTEM_CONFIG,
    USER_ROLE_REF,
    USER_GROUP_REF,
    GROUP_ROLE_REF,
    DEPARTMENT_ROLE_REF,
    POSITION_ROLE_REF,
    ORGANIZATION_ROLE_REF,
)

_BY_SLUG: dict[str, EntityDescriptor] = {entity.slug: entity for entity in ENTITIES}


def get_entity(slug: str) -> EntityDescriptor:
    """슬러그로 디스크립터를 조회합니다.

    Raises:
        KeyError: 등록되지 않은 슬러그 (Unknown slug)
    """
    return _BY_SLUG[slug]
