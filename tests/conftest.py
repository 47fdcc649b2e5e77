"""테스트 인프라: 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure: In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh in-memory database (aiosqlite + StaticPool) whose
schema is created from the ORM metadata, so no cleanup is needed.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, Database, get_db
from app.main import create_app
from app.models import *  # noqa: F401,F403  register all models with metadata
from app.models.organization import Organization
from app.models.permission import Role

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite://"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 빈 스키마를 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session


@pytest.fixture
def app(engine: AsyncEngine) -> FastAPI:
    """테스트 엔진을 주입한 애플리케이션."""
    return create_app(database=Database(engine))


@pytest_asyncio.fixture
async def client(app: FastAPI, db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트: DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def org(db: AsyncSession) -> Organization:
    """테스트 조직을 생성합니다."""
    o = Organization(code="ORG01", name="Test Corp", status="1")
    db.add(o)
    await db.commit()
    return o


@pytest_asyncio.fixture
async def roles(db: AsyncSession, org: Organization) -> dict[str, Role]:
    """기본 역할 3개를 생성합니다 (admin, administrator, staff)."""
    result: dict[str, Role] = {}
    for code, name in [("R01", "admin"), ("R02", "administrator"), ("R03", "staff")]:
        role = Role(code=code, name=name, org_code=org.code, application="console")
        db.add(role)
        result[name] = role
    await db.commit()
    return result


def actor_header(actor_id: int) -> dict[str, str]:
    return {"X-Actor-Id": str(actor_id)}
