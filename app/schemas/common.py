"""공통 Pydantic 요청/응답 스키마 정의.

Common Pydantic request/response schema definitions.
Includes the camelCase base model, the Condition/Dto/Vo base classes that
every entity schema extends, pagination metadata, and the uniform
response envelope returned by every endpoint.
"""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.utils.pagination import total_pages

T = TypeVar("T")

# 성공/실패 응답 코드: Envelope status codes
CODE_OK: int = 200
CODE_SERVER_ERROR: int = 500


class CamelModel(BaseModel):
    """camelCase JSON 필드명을 사용하는 베이스 모델.

    Base model exchanging camelCase JSON keys while keeping snake_case
    attribute names. Accepts both spellings on input and reads ORM
    instances via ``from_attributes``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# === 조회 조건 / 쓰기 / 읽기 베이스 스키마 ===

class ConditionBase(CamelModel):
    """조회 조건 베이스 스키마.

    Search condition base schema. Entity conditions add their own optional
    filter fields; declaration order fixes the order of generated clauses.

    Attributes:
        ids: 기본키 목록 필터 (Primary key set-membership filter)
        is_del: 소프트 삭제 마커 재정의 (Override of the implicit is_del = 0 clause)
        page: 페이지 번호, 기본 1 (Page number, default 1)
        size: 페이지 크기, 기본 20 (Page size, default 20)
    """

    ids: list[int] | None = None  # 기본키 목록 (Primary keys, IN filter)
    is_del: int | None = None  # 삭제 마커 재정의, 예: -1이면 삭제된 행 조회 (e.g. -1 lists deleted rows)
    page: int | None = None  # 페이지 번호: 1부터 시작 (Page, 1-indexed)
    size: int | None = None  # 페이지 크기 (Page size)


class DtoBase(CamelModel):
    """쓰기 요청 베이스 스키마.

    Write request base schema. ``rec_id`` targets an update,
    ``rec_ids`` targets a soft or hard delete.
    """

    rec_id: int | None = None  # 수정 대상 ID (Update target id)
    rec_ids: list[int] | None = None  # 삭제 대상 ID 목록 (Delete/remove target ids)


class VoBase(CamelModel):
    """읽기 모델 베이스 스키마: 공통 컬럼 포함.

    Read model base schema with the columns shared by every entity.
    """

    id: int  # 기본키 (Primary key)
    is_del: int | None = None  # 삭제 마커: 0=활성, -1=삭제 (Soft-delete marker)
    create_time: datetime | None = None  # 생성 일시 (Creation timestamp)
    update_time: datetime | None = None  # 수정 일시 (Last update timestamp)
    create_by: int | None = None  # 생성자 ID (Creator id)
    update_by: int | None = None  # 수정자 ID (Last updater id)


# === 페이지네이션 (Pagination) 스키마 ===

class PageInfo(CamelModel):
    """페이지네이션 메타데이터.

    Attributes:
        page: 현재 페이지 번호 (Current page number, 1-based)
        size: 페이지당 항목 수 (Items per page)
        total: 전체 항목 수 (Total count across all pages)
        total_page: 전체 페이지 수 (Total pages, ceil(total/size))
    """

    page: int
    size: int
    total: int
    total_page: int

    @classmethod
    def of(cls, page: int, size: int, total: int) -> "PageInfo":
        """전체 개수로부터 페이지 메타데이터를 계산합니다."""
        return cls(page=page, size=size, total=total, total_page=total_pages(total, size))


class PageData(CamelModel, Generic[T]):
    """페이지 결과: 항목 목록과 페이지 메타데이터.

    A page of results paired with its pagination metadata.
    """

    page_info: PageInfo  # 페이지 메타데이터 (Pagination metadata)
    items: list[T] = Field(default_factory=list)  # 현재 페이지 항목 (Items of this page)


# === 응답 봉투 (Response Envelope) ===

class ApiResponse(CamelModel, Generic[T]):
    """공통 응답 봉투: 모든 엔드포인트가 동일한 형태로 응답.

    Uniform response envelope. Success and failure share one shape so every
    endpoint answers ``{code, msg, data}`` regardless of the operation.

    Attributes:
        code: 상태 코드 (200 성공, 그 외 실패) (Status code)
        msg: 메시지 (Human-readable message)
        data: 응답 데이터, 실패 시 None (Payload, null on failure)
    """

    code: int
    msg: str
    data: T | None = None

    @classmethod
    def ok(cls, data: Any = None) -> "ApiResponse":
        """성공 응답을 생성합니다 (Build a success envelope)."""
        return cls(code=CODE_OK, msg="success", data=data)

    @classmethod
    def fail(cls, msg: str, code: int = CODE_SERVER_ERROR) -> "ApiResponse":
        """실패 응답을 생성합니다 (Build a failure envelope with no payload)."""
        return cls(code=code, msg=msg, data=None)
