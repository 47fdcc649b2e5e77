"""조회 조건 → SQL 필터 컴파일러.

Condition-to-filter compiler.
Turns a sparse Condition into a conjunctive SQLAlchemy predicate: a base
soft-delete clause plus one narrowing clause per field that is present.
Fields are visited in declaration order so the generated SQL text is
deterministic.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

from pydantic import BaseModel
from sqlalchemy import ColumnElement, and_

from app.models.base import ACTIVE


class FilterStrategy(str, Enum):
    """필드별 필터 방식 (Per-field filter strategy)."""

    EQ = "eq"  # 완전 일치 (column = value)
    IN = "in"  # 집합 포함 (column IN (...))
    LIKE = "like"  # 부분 일치 (column LIKE '%value%')


@dataclass(frozen=True)
class FieldFilter:
    """조회 조건 필드 하나와 대상 컬럼의 매핑.

    Maps one Condition field to the column it narrows.

    Attributes:
        field: 조회 조건 필드명 (Condition attribute name)
        strategy: 필터 방식 (Filter strategy)
        column: 대상 컬럼명, None이면 field와 동일 (Target column, defaults to field)
    """

    field: str
    strategy: FilterStrategy = FilterStrategy.EQ
    column: str | None = None

    @property
    def column_name(self) -> str:
        return self.column or self.field


def build_clauses(
    model: type,
    filters: Sequence[FieldFilter],
    condition: BaseModel,
    soft_delete_column: str = "is_del",
) -> list[ColumnElement[bool]]:
    """조회 조건에서 WHERE 절 목록을 생성합니다.

    Build the list of WHERE clauses for a condition. The first clause is
    always the soft-delete clause (``is_del = 0`` unless the condition sets
    ``is_del``); each following clause comes from one non-null field.

    Args:
        model: SQLAlchemy 모델 클래스 (Mapped model class)
        filters: 필드 필터 목록: 선언 순서대로 평가 (Field filters, evaluated in order)
        condition: 조회 조건 인스턴스 (Condition instance)
        soft_delete_column: 소프트 삭제 컬럼명 (Soft-delete column name)

    Returns:
        list[ColumnElement[bool]]: [기본 절, 좁히는 절...] (Base clause, then narrowing clauses)
    """
    is_del: int | None = getattr(condition, "is_del", None)
    clauses: list[ColumnElement[bool]] = [
        getattr(model, soft_delete_column) == (ACTIVE if is_del is None else is_del)
    ]

    for field_filter in filters:
        value: Any = getattr(condition, field_filter.field, None)
        if value is None:
            continue
        column = getattr(model, field_filter.column_name)
        if field_filter.strategy is FilterStrategy.IN:
            clauses.append(column.in_(list(value)))
        elif field_filter.strategy is FilterStrategy.LIKE:
            # '%', '_' 는 이스케이프하여 입력값 그대로 부분 일치
            clauses.append(column.contains(value, autoescape=True))
        else:
            clauses.append(column == value)
    return clauses


def compile_filter(
    model: type,
    filters: Sequence[FieldFilter],
    condition: BaseModel,
    soft_delete_column: str = "is_del",
) -> ColumnElement[bool]:
    """WHERE 절 목록을 AND로 결합한 단일 조건식을 반환합니다.

    Conjunction of :func:`build_clauses`. Pure; absent fields are skipped.
    """
    return and_(*build_clauses(model, filters, condition, soft_delete_column))
