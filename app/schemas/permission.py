"""역할/권한/시스템 설정 Pydantic 스키마 정의.

Role, Permission and SystemConfig Condition / Dto / Vo schemas.
"""

from typing import Any

from app.schemas.common import CamelModel, ConditionBase, DtoBase, VoBase


# === 역할 (Role) 스키마 ===

class RoleFields(CamelModel):
    code: str | None = None
    parent_code: str | None = None
    name: str | None = None
    application: str | None = None  # 소속 애플리케이션 (Owning application)
    org_code: str | None = None
    role_type: int | None = None  # 역할 유형 코드 (Role type code)
    description: str | None = None
    extra: Any = None
    remark: str | None = None
    path: str | None = None


class RoleCondition(ConditionBase):
    """역할 조회 조건: name은 부분 일치."""

    code: str | None = None
    parent_code: str | None = None
    name: str | None = None
    application: str | None = None
    org_code: str | None = None
    role_type: int | None = None


class RoleDto(RoleFields, DtoBase):
    pass


class RoleVo(RoleFields, VoBase):
    pass


# === 권한 (Permission) 스키마 ===

class PermissionFields(CamelModel):
    code: str | None = None  # 권한 코드 (e.g. "user:read")
    parent_uuid: str | None = None  # 상위 권한 식별자 (Parent permission id)
    name: str | None = None
    application: str | None = None
    permission_type: str | None = None  # menu / button / api
    uri: str | None = None
    method: str | None = None
    sort: int | None = None
    description: str | None = None
    extra: Any = None
    remark: str | None = None


class PermissionCondition(ConditionBase):
    """권한 조회 조건: name은 부분 일치."""

    code: str | None = None
    parent_uuid: str | None = None
    name: str | None = None
    application: str | None = None
    permission_type: str | None = None


class PermissionDto(PermissionFields, DtoBase):
    pass


class PermissionVo(PermissionFields, VoBase):
    pass


# === 시스템 설정 (SystemConfig) 스키마 ===

class SystemConfigFields(CamelModel):
    config_key: str | None = None
    config_value: str | None = None
    config_type: str | None = None
    description: str | None = None
    remark: str | None = None


class SystemConfigCondition(ConditionBase):
    config_key: str | None = None
    config_type: str | None = None


class SystemConfigDto(SystemConfigFields, DtoBase):
    pass


class SystemConfigVo(SystemConfigFields, VoBase):
    pass
