"""참조 테이블 Pydantic 스키마 정의.

Reference table Condition / Dto / Vo schemas. Every column of a
reference table is also an exact-match filter.
"""

from app.schemas.common import CamelModel, ConditionBase, DtoBase, VoBase


class UserRoleRefFields(CamelModel):
    user_code: str | None = None
    role_code: str | None = None
    org_code: str | None = None


class UserRoleRefCondition(UserRoleRefFields, ConditionBase):
    pass


class UserRoleRefDto(UserRoleRefFields, DtoBase):
    pass


class UserRoleRefVo(UserRoleRefFields, VoBase):
    pass


class UserGroupRefFields(CamelModel):
    user_code: str | None = None
    group_code: str | None = None
    org_code: str | None = None


class UserGroupRefCondition(UserGroupRefFields, ConditionBase):
    pass


class UserGroupRefDto(UserGroupRefFields, DtoBase):
    pass


class UserGroupRefVo(UserGroupRefFields, VoBase):
    pass


class GroupRoleRefFields(CamelModel):
    group_code: str | None = None
    role_code: str | None = None
    org_code: str | None = None


class GroupRoleRefCondition(GroupRoleRefFields, ConditionBase):
    pass


class GroupRoleRefDto(GroupRoleRefFields, DtoBase):
    pass


class GroupRoleRefVo(GroupRoleRefFields, VoBase):
    pass


class DepartmentRoleRefFields(CamelModel):
    department_code: str | None = None
    role_code: str | None = None
    org_code: str | None = None


class DepartmentRoleRefCondition(DepartmentRoleRefFields, ConditionBase):
    pass


class DepartmentRoleRefDto(DepartmentRoleRefFields, DtoBase):
    pass


class DepartmentRoleRefVo(DepartmentRoleRefFields, VoBase):
    pass


class PositionRoleRefFields(CamelModel):
    position_code: str | None = None
    role_code: str | None = None
    org_code: str | None = None


class PositionRoleRefCondition(PositionRoleRefFields, ConditionBase):
    pass


class PositionRoleRefDto(PositionRoleRefFields, DtoBase):
    pass


class PositionRoleRefVo(PositionRoleRefFields, VoBase):
    pass


class OrganizationRoleRefFields(CamelModel):
    org_code: str | None = None
    role_code: str | None = None


class OrganizationRoleRefCondition(OrganizationRoleRefFields, ConditionBase):
    pass


class OrganizationRoleRefDto(OrganizationRoleRefFields, DtoBase):
    pass


class OrganizationRoleRefVo(OrganizationRoleRefFields, VoBase):
    pass
