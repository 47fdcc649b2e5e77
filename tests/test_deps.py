"""의존성 주입 테스트: 작업자 헤더, 조회 조건 파싱.

Dependency tests: actor header resolution and query-string condition parsing.
"""

import pytest
from starlette.requests import Request

from app.api.deps import condition_dependency, get_actor_id
from app.config import settings
from app.schemas.permission import RoleCondition
from app.utils.exceptions import BadRequestError


def _request(headers: dict[str, str] | None = None, query: str = "") -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "query_string": query.encode(),
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
    }
    return Request(scope)


class TestActorId:
    """작업자 ID 헤더 테스트."""

    async def test_header_value(self):
        """헤더 값을 정수로 반환."""
        assert await get_actor_id(_request({"X-Actor-Id": "42"})) == 42

    async def test_missing_header_falls_back(self, monkeypatch):
        """헤더가 없으면 기본 작업자 ID."""
        monkeypatch.setattr(settings, "DEFAULT_ACTOR_ID", 3)
        assert await get_actor_id(_request()) == 3

    async def test_missing_header_required(self, monkeypatch):
        """필수 설정이면 헤더 누락 시 400."""
        monkeypatch.setattr(settings, "REQUIRE_ACTOR_ID", True)
        with pytest.raises(BadRequestError):
            await get_actor_id(_request())

    async def test_non_integer(self):
        """정수가 아니면 400."""
        with pytest.raises(BadRequestError):
            await get_actor_id(_request({"X-Actor-Id": "admin"}))


class TestConditionParsing:
    """조회 조건 파싱 테스트."""

    async def test_camel_and_snake_keys(self):
        """camelCase와 snake_case 키 모두 허용."""
        parse = condition_dependency(RoleCondition)
        condition = await parse(_request(query="orgCode=ORG01&role_type=2&page=3"))
        assert condition.org_code == "ORG01"
        assert condition.role_type == 2
        assert condition.page == 3
        assert condition.size is None

    async def test_ids_forms(self):
        """ids는 쉼표 구분과 반복 키를 합쳐서 파싱."""
        parse = condition_dependency(RoleCondition)
        condition = await parse(_request(query="ids=1,2&ids=5"))
        assert condition.ids == [1, 2, 5]

    async def test_empty_ids_ignored(self):
        """빈 ids는 필터로 쓰지 않음."""
        condition = await condition_dependency(RoleCondition)(_request(query="ids="))
        assert condition.ids is None

    async def test_unknown_keys_ignored(self):
        """모르는 키는 무시."""
        condition = await condition_dependency(RoleCondition)(_request(query="foo=bar"))
        assert condition == RoleCondition()

    async def test_invalid_value(self):
        """타입이 맞지 않으면 400."""
        with pytest.raises(BadRequestError):
            await condition_dependency(RoleCondition)(_request(query="ids=1,x"))
