"""사용자 관련 Pydantic 조회조건/쓰기/읽기 스키마 정의.

User, UserInfo and UserWechatInfo Condition / Dto / Vo schema definitions.
Passwords are accepted on write (Dto) but never projected into a Vo.
"""

from datetime import date, datetime
from typing import Any

from app.schemas.common import CamelModel, ConditionBase, DtoBase, VoBase


# === 사용자 (User) 스키마 ===

class UserFields(CamelModel):
    """사용자 비즈니스 컬럼 (User business columns, password excluded)."""

    user_name: str | None = None  # 로그인 아이디 (Login name)
    real_name: str | None = None  # 실명 (Real name)
    type: int | None = None  # 계정 유형 (Account type)
    status: int | None = None  # 계정 상태 (Account status)
    email: str | None = None
    area_code: str | None = None  # 국가/지역 번호 (Phone area code)
    phone: str | None = None
    remark: str | None = None
    head_pic: str | None = None  # 프로필 이미지 URL (Avatar URL)
    is_admin: int | None = None  # 관리자 여부 (Admin flag)
    open_id: str | None = None
    last_login_time: datetime | None = None
    wechat_open_id: str | None = None
    wechat_union_id: str | None = None


class UserCondition(ConditionBase):
    """사용자 조회 조건: real_name은 부분 일치, 나머지는 완전 일치.

    User search condition. ``real_name`` is a substring match; every
    other field is an exact match.
    """

    user_name: str | None = None
    real_name: str | None = None
    type: int | None = None
    status: int | None = None
    email: str | None = None
    area_code: str | None = None
    phone: str | None = None
    open_id: str | None = None
    wechat_open_id: str | None = None
    wechat_union_id: str | None = None


class UserDto(UserFields, DtoBase):
    """사용자 생성/수정/삭제 요청 스키마 (부분 업데이트)."""

    password: str | None = None  # 비밀번호: 쓰기 전용 (Write-only)


class UserVo(UserFields, VoBase):
    """사용자 응답 스키마 (User read model)."""


# === 사용자 상세 (UserInfo) 스키마 ===

class UserInfoFields(CamelModel):
    """사용자 상세 비즈니스 컬럼 (UserInfo business columns, password excluded)."""

    user_code: str | None = None  # 사용자 코드 (User business code)
    username: str | None = None
    login_status: str | None = None
    english_name: str | None = None
    real_name: str | None = None
    nick_name: str | None = None
    cellphone: str | None = None
    gender: str | None = None
    portrait: str | None = None
    user_type: str | None = None
    birthday: date | None = None
    id_card_type: str | None = None  # 신분증 유형 (ID document type)
    id_card_no: str | None = None  # 신분증 번호 (ID document number)
    email: str | None = None
    qq: str | None = None
    wx_union_id: str | None = None
    wx_open_id: str | None = None
    wx_mini_open_id: str | None = None
    address: str | None = None
    parent_code: str | None = None
    path: str | None = None
    effective_date: date | None = None  # 유효 시작일 (Effective from)
    invalid_date: date | None = None  # 만료일 (Invalid after)
    status: str | None = None
    org_code: str | None = None  # 소속 조직 코드 (Organization code)
    department_code: str | None = None  # 소속 부서 코드 (Department code)
    position_code: str | None = None  # 직책 코드 (Position code)
    extra: Any = None  # 확장 JSON (Free-form JSON)
    remark: str | None = None
    rec_sign: str | None = None  # 레코드 서명 (Record signature)


class UserInfoCondition(ConditionBase):
    """사용자 상세 조회 조건: real_name, nick_name은 부분 일치."""

    user_code: str | None = None
    username: str | None = None
    real_name: str | None = None
    nick_name: str | None = None
    cellphone: str | None = None
    gender: str | None = None
    user_type: str | None = None
    id_card_type: str | None = None
    id_card_no: str | None = None
    email: str | None = None
    qq: str | None = None
    wx_union_id: str | None = None
    wx_open_id: str | None = None
    wx_mini_open_id: str | None = None
    parent_code: str | None = None
    path: str | None = None
    status: str | None = None
    org_code: str | None = None
    department_code: str | None = None
    position_code: str | None = None


class UserInfoDto(UserInfoFields, DtoBase):
    """사용자 상세 쓰기 요청 스키마."""

    password: str | None = None  # 비밀번호: 쓰기 전용 (Write-only)


class UserInfoVo(UserInfoFields, VoBase):
    """사용자 상세 응답 스키마."""


# === 위챗 정보 (UserWechatInfo) 스키마 ===

class UserWechatInfoFields(CamelModel):
    """위챗 연동 비즈니스 컬럼."""

    union_id: str | None = None
    wechat_open_id: str | None = None
    mini_open_id: str | None = None
    nickname: str | None = None
    language: str | None = None
    subscribe: int | None = None  # 공식계정 구독 여부 (Subscribed flag)
    head_img_url: str | None = None
    subscribe_time: int | None = None  # 유닉스 타임스탬프 (Unix timestamp)
    remark: str | None = None
    group_id: int | None = None
    tag_ids: Any = None  # 태그 ID JSON 배열 (Tag id JSON array)
    subscribe_scene: str | None = None
    qr_scene: str | None = None
    qr_scene_str: str | None = None
    app_id: str | None = None
    app_type: str | None = None


class UserWechatInfoCondition(ConditionBase):
    """위챗 정보 조회 조건: nickname은 부분 일치."""

    union_id: str | None = None
    wechat_open_id: str | None = None
    mini_open_id: str | None = None
    nickname: str | None = None
    app_id: str | None = None


class UserWechatInfoDto(UserWechatInfoFields, DtoBase):
    pass


class UserWechatInfoVo(UserWechatInfoFields, VoBase):
    pass
