"""Axiom 로깅 미들웨어 테스트.

Axiom logging middleware tests: event shape, masking, skipped paths,
ingest failures never breaking the request.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.middleware.axiom_logging import AxiomLoggingMiddleware, _entity_of, _mask_dict


class FakeAxiom:
    """ingest_events 호출을 기록하는 가짜 Axiom 클라이언트."""

    def __init__(self, fail: bool = False) -> None:
        self.events: list[dict] = []
        self.fail = fail

    def ingest_events(self, dataset: str, events: list[dict]) -> None:
        if self.fail:
            raise RuntimeError("axiom down")
        self.events.extend(events)


async def _client(app: FastAPI, db: AsyncSession, axiom: FakeAxiom) -> AsyncClient:
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    app.add_middleware(AxiomLoggingMiddleware, client=axiom, dataset="api-logs")
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest_asyncio.fixture
async def axiom() -> FakeAxiom:
    return FakeAxiom()


class TestHelpers:
    """헬퍼 함수 테스트."""

    def test_mask(self):
        """비밀번호/신분증 필드는 마스킹."""
        masked = _mask_dict({"userName": "kim", "password": "pw", "idCardNo": "123"})
        assert masked == {"userName": "kim", "password": "***", "idCardNo": "***"}

    def test_entity_of(self):
        """경로에서 등록된 엔티티 슬러그 추출."""
        assert _entity_of("/role/page") == "role"
        assert _entity_of("/api/userInfo/1", "/api") == "userInfo"
        assert _entity_of("/") is None
        assert _entity_of("/unknown/list") is None


class TestDispatch:
    """요청 로깅 테스트."""

    async def test_logs_success(self, app: FastAPI, db: AsyncSession, axiom: FakeAxiom):
        """성공 요청은 엔티티와 HTTP 상태만 기록, 봉투 코드는 없음."""
        async with await _client(app, db, axiom) as client:
            res = await client.post("/role", json={"name": "ops", "password": "pw"})
        assert res.status_code == 200
        event = axiom.events[0]
        assert event["method"] == "POST"
        assert event["entity"] == "role"
        assert event["status_code"] == 200
        assert "envelope_code" not in event
        assert "error" not in event
        assert event["request_body"]["password"] == "***"

    async def test_logs_error_envelope(self, app: FastAPI, db: AsyncSession, axiom: FakeAxiom):
        """실패 요청은 봉투의 code/msg를 기록하고 응답 본문은 그대로 전달."""
        async with await _client(app, db, axiom) as client:
            res = await client.put("/role", json={"name": "x"})
        assert res.status_code == 400
        assert res.json()["code"] == 400
        event = axiom.events[0]
        assert event["envelope_code"] == 400
        assert "recId" in event["error"]

    async def test_skips_health(self, app: FastAPI, db: AsyncSession, axiom: FakeAxiom):
        """헬스 체크는 기록하지 않음."""
        async with await _client(app, db, axiom) as client:
            await client.get("/health")
        assert axiom.events == []

    async def test_ingest_failure_does_not_break_request(self, app: FastAPI, db: AsyncSession):
        """Axiom 전송 실패해도 응답은 정상."""
        async with await _client(app, db, FakeAxiom(fail=True)) as client:
            res = await client.get("/role/list")
        assert res.status_code == 200
        assert res.json()["data"] == []
