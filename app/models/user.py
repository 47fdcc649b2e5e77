"""사용자 관련 SQLAlchemy ORM 모델 정의.

User-related SQLAlchemy ORM model definitions.

Tables:
    - user: 로그인 계정 (Login accounts)
    - user_info: 사용자 상세 정보 (User profile, org/department/position codes)
    - user_wechat_info: 위챗 연동 정보 (WeChat binding info)
"""

from datetime import date, datetime
from typing import Any

from sqlalchemy import JSON, BigInteger, Date, DateTime, Integer, SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import AuditMixin


class User(AuditMixin, Base):
    """사용자 계정 모델.

    User account model.

    Attributes:
        user_name: 로그인 아이디 (Login name)
        real_name: 실명 (Real name)
        password: 비밀번호 해시: 응답에 노출하지 않음 (Password hash, never projected)
        type: 계정 유형 (Account type)
        status: 계정 상태 (Account status)
        is_admin: 관리자 여부 (Admin flag)
        last_login_time: 마지막 로그인 일시 (Last login time)
    """

    __tablename__ = "user"

    user_name: Mapped[str | None] = mapped_column(String(64))
    real_name: Mapped[str | None] = mapped_column(String(64))
    password: Mapped[str | None] = mapped_column(String(255))
    type: Mapped[int | None] = mapped_column(SmallInteger, default=0)
    status: Mapped[int | None] = mapped_column(SmallInteger, default=0)
    email: Mapped[str | None] = mapped_column(String(128))
    area_code: Mapped[str | None] = mapped_column(String(16))
    phone: Mapped[str | None] = mapped_column(String(32))
    remark: Mapped[str | None] = mapped_column(String(512))
    head_pic: Mapped[str | None] = mapped_column(String(512))
    is_admin: Mapped[int | None] = mapped_column(SmallInteger, default=0)
    open_id: Mapped[str | None] = mapped_column(String(128))
    last_login_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    wechat_open_id: Mapped[str | None] = mapped_column(String(128))
    wechat_union_id: Mapped[str | None] = mapped_column(String(128))


class UserInfo(AuditMixin, Base):
    """사용자 상세 정보 모델: 조직/부서/직책 코드를 포함.

    User profile model. Links a person to organization, department and
    position by business code rather than foreign key.
    """

    __tablename__ = "user_info"

    user_code: Mapped[str | None] = mapped_column(String(64))
    username: Mapped[str | None] = mapped_column(String(64))
    login_status: Mapped[str | None] = mapped_column(String(16))
    english_name: Mapped[str | None] = mapped_column(String(64))
    real_name: Mapped[str | None] = mapped_column(String(64))
    nick_name: Mapped[str | None] = mapped_column(String(64))
    cellphone: Mapped[str | None] = mapped_column(String(32))
    gender: Mapped[str | None] = mapped_column(String(8))
    portrait: Mapped[str | None] = mapped_column(String(512))
    user_type: Mapped[str | None] = mapped_column(String(16))
    birthday: Mapped[date | None] = mapped_column(Date)
    password: Mapped[str | None] = mapped_column(String(255))
    id_card_type: Mapped[str | None] = mapped_column(String(16))
    id_card_no: Mapped[str | None] = mapped_column(String(64))
    email: Mapped[str | None] = mapped_column(String(128))
    qq: Mapped[str | None] = mapped_column(String(32))
    wx_union_id: Mapped[str | None] = mapped_column(String(128))
    wx_open_id: Mapped[str | None] = mapped_column(String(128))
    wx_mini_open_id: Mapped[str | None] = mapped_column(String(128))
    address: Mapped[str | None] = mapped_column(String(512))
    parent_code: Mapped[str | None] = mapped_column(String(64))
    path: Mapped[str | None] = mapped_column(String(512))
    effective_date: Mapped[date | None] = mapped_column(Date)
    invalid_date: Mapped[date | None] = mapped_column(Date)
    status: Mapped[str | None] = mapped_column(String(16))
    org_code: Mapped[str | None] = mapped_column(String(64))
    department_code: Mapped[str | None] = mapped_column(String(64))
    position_code: Mapped[str | None] = mapped_column(String(64))
    extra: Mapped[Any | None] = mapped_column(JSON)
    remark: Mapped[str | None] = mapped_column(String(512))
    rec_sign: Mapped[str | None] = mapped_column(String(128))


class UserWechatInfo(AuditMixin, Base):
    """위챗 연동 정보 모델 (WeChat official-account / mini-program binding)."""

    __tablename__ = "user_wechat_info"

    union_id: Mapped[str | None] = mapped_column(String(128))
    wechat_open_id: Mapped[str | None] = mapped_column(String(128))
    mini_open_id: Mapped[str | None] = mapped_column(String(128))
    nickname: Mapped[str | None] = mapped_column(String(128))
    language: Mapped[str | None] = mapped_column(String(16))
    subscribe: Mapped[int | None] = mapped_column(SmallInteger)
    head_img_url: Mapped[str | None] = mapped_column(String(512))
    # 구독 시각: 위챗이 내려주는 유닉스 타임스탬프 그대로 저장
    subscribe_time: Mapped[int | None] = mapped_column(BigInteger)
    remark: Mapped[str | None] = mapped_column(String(512))
    group_id: Mapped[int | None] = mapped_column(Integer)
    tag_ids: Mapped[Any | None] = mapped_column(JSON)
    subscribe_scene: Mapped[str | None] = mapped_column(String(64))
    qr_scene: Mapped[str | None] = mapped_column(String(64))
    qr_scene_str: Mapped[str | None] = mapped_column(Text)
    app_id: Mapped[str | None] = mapped_column(String(64))
    app_type: Mapped[str | None] = mapped_column(String(16))
