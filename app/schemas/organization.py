"""조직 구조 관련 Pydantic 조회조건/쓰기/읽기 스키마 정의.

Organization, Department, Position and Group Condition / Dto / Vo
schema definitions. ``name`` is a substring filter on every entity here.
"""

from datetime import date
from typing import Any

from app.schemas.common import CamelModel, ConditionBase, DtoBase, VoBase


# === 조직 (Organization) 스키마 ===

class OrganizationFields(CamelModel):
    """조직 비즈니스 컬럼.

    Attributes:
        code: 조직 코드 (Organization code)
        parent_code: 상위 조직 코드 (Parent organization code)
        uscc: 통일사회신용코드 (Unified social credit code)
        business_license: 사업자등록증 이미지 URL (Business license image)
        id_card_front: 대표자 신분증 앞면 URL (Legal representative ID, front)
        id_card_back: 대표자 신분증 뒷면 URL (Legal representative ID, back)
    """

    code: str | None = None
    parent_code: str | None = None
    name: str | None = None
    type: str | None = None
    contacts: str | None = None  # 담당자 (Contact person)
    cellphone: str | None = None
    email: str | None = None
    uscc: str | None = None
    business_license: str | None = None
    id_card_front: str | None = None
    id_card_back: str | None = None
    invalid_date: date | None = None
    status: str | None = None
    extra: Any = None
    remark: str | None = None
    path: str | None = None
    rec_sign: str | None = None


class OrganizationCondition(ConditionBase):
    """조직 조회 조건."""

    code: str | None = None
    parent_code: str | None = None
    name: str | None = None
    type: str | None = None
    contacts: str | None = None
    cellphone: str | None = None
    email: str | None = None
    uscc: str | None = None
    status: str | None = None


class OrganizationDto(OrganizationFields, DtoBase):
    """조직 쓰기 요청 스키마 (부분 업데이트)."""


class OrganizationVo(OrganizationFields, VoBase):
    """조직 응답 스키마."""


# === 부서 (Department) 스키마 ===

class DepartmentFields(CamelModel):
    code: str | None = None
    parent_code: str | None = None
    name: str | None = None
    description: str | None = None
    org_code: str | None = None  # 소속 조직 코드 (Organization code)
    extra: Any = None
    remark: str | None = None
    path: str | None = None


class DepartmentCondition(ConditionBase):
    code: str | None = None
    parent_code: str | None = None
    name: str | None = None
    org_code: str | None = None


class DepartmentDto(DepartmentFields, DtoBase):
    pass


class DepartmentVo(DepartmentFields, VoBase):
    pass


# === 직책 (Position) 스키마 ===

class PositionFields(CamelModel):
    code: str | None = None
    parent_code: str | None = None
    name: str | None = None
    description: str | None = None
    department_code: str | None = None  # 소속 부서 코드 (Department code)
    org_code: str | None = None
    extra: Any = None
    remark: str | None = None
    path: str | None = None


class PositionCondition(ConditionBase):
    code: str | None = None
    name: str | None = None
    department_code: str | None = None
    org_code: str | None = None


class PositionDto(PositionFields, DtoBase):
    pass


class PositionVo(PositionFields, VoBase):
    pass


# === 그룹 (Group) 스키마 ===

class GroupFields(CamelModel):
    code: str | None = None
    name: str | None = None
    description: str | None = None
    org_code: str | None = None
    extra: Any = None
    remark: str | None = None


class GroupCondition(ConditionBase):
    code: str | None = None
    name: str | None = None
    org_code: str | None = None


class GroupDto(GroupFields, DtoBase):
    pass


class GroupVo(GroupFields, VoBase):
    pass
