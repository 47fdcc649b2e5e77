"""엔티티 디스크립터: 엔티티별 스키마 선언.

Entity descriptor: the declarative configuration that parameterizes the
generic repository, service and router for one entity. Filterable fields
are derived from the Condition class in declaration order.

Usage:
    role = EntityDescriptor(
        slug="role", model=Role,
        condition=RoleCondition, dto=RoleDto, vo=RoleVo,
        like_fields=("name",),
    )
"""

from dataclasses import dataclass, field
from functools import cached_property

from app.repositories.base import BaseRepository
from app.repositories.filters import FieldFilter, FilterStrategy
from app.schemas.common import ConditionBase, DtoBase, VoBase

# 필터 대상이 아닌 조회 조건 필드: 페이지네이션/삭제 마커는 별도 처리
NON_FILTER_FIELDS: frozenset[str] = frozenset({"page", "size", "is_del"})


@dataclass(frozen=True)
class EntityDescriptor:
    """엔티티 하나의 선언적 스키마.

    Declarative schema for one entity.

    Attributes:
        slug: URL 경로 이름 (Route segment, e.g. "userInfo")
        model: SQLAlchemy 모델 클래스 (Mapped model)
        condition: 조회 조건 스키마 (Condition schema)
        dto: 쓰기 스키마 (Write schema)
        vo: 읽기 스키마 (Read schema)
        like_fields: 부분 일치 필드명 (Fields filtered by substring)
        title: OpenAPI 태그 이름 (Tag shown in the API docs)
        primary_key: 기본키 컬럼명 (Primary key column)
        soft_delete_column: 소프트 삭제 컬럼명 (Soft-delete column)
        audit_columns: 작업자 컬럼 (생성자, 수정자) (Creator/updater columns)
        filters: 조회 조건으로부터 유도된 필드 필터 (Derived field filters)
    """

    slug: str
    model: type
    condition: type[ConditionBase]
    dto: type[DtoBase]
    vo: type[VoBase]
    like_fields: tuple[str, ...] = ()
    title: str = ""
    primary_key: str = "id"
    soft_delete_column: str = "is_del"
    audit_columns: tuple[str, str] = ("create_by", "update_by")
    filters: tuple[FieldFilter, ...] = field(init=False)

    def __post_init__(self) -> None:
        unknown = set(self.like_fields) - set(self.condition.model_fields)
        if unknown:
            raise ValueError(f"{self.slug}: like_fields not on condition: {sorted(unknown)}")
        # frozen dataclass: object.__setattr__로 유도 필드 설정
        object.__setattr__(self, "filters", tuple(self._derive_filters()))
        if not self.title:
            object.__setattr__(self, "title", self.slug)

    def _derive_filters(self) -> list[FieldFilter]:
        filters: list[FieldFilter] = []
        for name in self.condition.model_fields:
            if name in NON_FILTER_FIELDS:
                continue
            if name == "ids":
                filters.append(FieldFilter(name, FilterStrategy.IN, column=self.primary_key))
            elif name in self.like_fields:
                filters.append(FieldFilter(name, FilterStrategy.LIKE))
            else:
                filters.append(FieldFilter(name))
        return filters

    @property
    def create_by_column(self) -> str:
        return self.audit_columns[0]

    @property
    def update_by_column(self) -> str:
        return self.audit_columns[1]

    @cached_property
    def repository(self) -> BaseRepository:
        """이 엔티티에 바인딩된 레포지토리 (Repository bound to this entity)."""
        return BaseRepository(self)
