"""조회 조건 → SQL 필터 컴파일러 테스트.

Condition-to-filter compiler tests: base soft-delete clause, one clause per
present field, strategy per field, deterministic clause order.
"""

import pytest

from app.models.permission import Role
from app.registry import ENTITIES, ROLE, USER_INFO, USER_ROLE_REF, get_entity
from app.repositories.descriptor import EntityDescriptor
from app.repositories.filters import FilterStrategy, build_clauses, compile_filter
from app.schemas.permission import RoleCondition, RoleDto, RoleVo


def _sql(clause) -> str:
    return str(clause.compile(compile_kwargs={"literal_binds": True}))


def _clauses(condition: RoleCondition) -> list:
    return build_clauses(Role, ROLE.filters, condition)


class TestBaseClause:
    """기본 절 (is_del) 테스트."""

    def test_empty_condition_has_single_base_clause(self):
        """빈 조회 조건이면 is_del = 0 하나만 생성."""
        clauses = _clauses(RoleCondition())
        assert len(clauses) == 1
        assert _sql(clauses[0]) == "role.is_del = 0"

    def test_is_del_override(self):
        """is_del 지정 시 기본 절 값이 바뀜."""
        clauses = _clauses(RoleCondition(is_del=-1))
        assert len(clauses) == 1
        assert _sql(clauses[0]) == "role.is_del = -1"

    def test_page_and_size_add_no_clause(self):
        """page/size는 필터 절을 만들지 않음."""
        assert len(_clauses(RoleCondition(page=2, size=5))) == 1


class TestNarrowingClauses:
    """필드별 좁히는 절 테스트."""

    def test_n_fields_make_n_clauses(self):
        """값이 있는 필드 N개 → 좁히는 절 N개 + 기본 절."""
        condition = RoleCondition(code="R01", org_code="ORG01", role_type=1)
        assert len(_clauses(condition)) == 4

    def test_ids_is_in_on_primary_key(self):
        """ids는 기본키 IN 절."""
        clauses = _clauses(RoleCondition(ids=[1, 2, 3]))
        assert _sql(clauses[1]) == "role.id IN (1, 2, 3)"

    def test_name_is_substring_match(self):
        """name은 LIKE 부분 일치, 와일드카드 이스케이프."""
        sql = _sql(_clauses(RoleCondition(name="adm"))[1])
        assert "role.name LIKE" in sql
        assert "ESCAPE" in sql

    def test_other_fields_are_exact_match(self):
        """나머지 필드는 완전 일치."""
        assert _sql(_clauses(RoleCondition(code="R01"))[1]) == "role.code = 'R01'"

    def test_clause_order_follows_declaration(self):
        """절 순서는 입력 순서가 아닌 필드 선언 순서."""
        clauses = _clauses(RoleCondition(org_code="ORG01", code="R01"))
        assert _sql(clauses[1]) == "role.code = 'R01'"
        assert _sql(clauses[2]) == "role.org_code = 'ORG01'"

    def test_compile_filter_is_conjunction(self):
        """compile_filter는 모든 절을 AND로 결합."""
        sql = _sql(compile_filter(Role, ROLE.filters, RoleCondition(code="R01")))
        assert sql == "role.is_del = 0 AND role.code = 'R01'"


class TestDescriptorFilters:
    """디스크립터 필터 유도 테스트."""

    def test_strategies_derived_from_condition(self):
        """ids → IN, like_fields → LIKE, 나머지 → EQ."""
        strategies = {f.field: f.strategy for f in USER_INFO.filters}
        assert strategies["ids"] is FilterStrategy.IN
        assert strategies["real_name"] is FilterStrategy.LIKE
        assert strategies["nick_name"] is FilterStrategy.LIKE
        assert strategies["user_code"] is FilterStrategy.EQ
        assert "page" not in strategies and "is_del" not in strategies

    def test_reference_tables_are_exact_match(self):
        """참조 테이블은 ids 외 모든 필드가 완전 일치."""
        fields = [(f.field, f.strategy) for f in USER_ROLE_REF.filters]
        assert fields == [
            ("ids", FilterStrategy.IN),
            ("user_code", FilterStrategy.EQ),
            ("role_code", FilterStrategy.EQ),
            ("org_code", FilterStrategy.EQ),
        ]

    def test_unknown_like_field_rejected(self):
        """조회 조건에 없는 like 필드는 ValueError."""
        with pytest.raises(ValueError):
            EntityDescriptor(
                slug="role", model=Role,
                condition=RoleCondition, dto=RoleDto, vo=RoleVo,
                like_fields=("missing",),
            )

    def test_registry_has_all_entities(self):
        """레지스트리에 16개 엔티티, 슬러그 중복 없음."""
        slugs = [e.slug for e in ENTITIES]
        assert len(slugs) == 16
        assert len(set(slugs)) == 16
        assert get_entity("userInfo") is USER_INFO
