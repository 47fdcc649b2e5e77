"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Defines the ORM base class and the ``Database`` store handle that owns the
async engine (connection pool) and session factory. The handle is built once
by the application entry point and injected into requests; there is no
module-level engine.
"""

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    All models inherit from this class to register with the metadata.
    """

    pass


class Database:
    """DB 연결 풀과 세션 팩토리를 보관하는 저장소 핸들.

    Store handle wrapping an ``AsyncEngine`` and its session factory.
    Created at startup, read-only while serving, disposed at shutdown.

    Attributes:
        engine: 비동기 엔진: 커넥션 풀 소유 (Async engine owning the pool)
        session_factory: 비동기 세션 팩토리 (Async session factory)
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine: AsyncEngine = engine
        # expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """설정값으로 엔진을 생성합니다.

        Build the engine from settings. ``DB_POOL_MIN_SIZE`` maps to
        ``pool_size`` and the remainder up to ``DB_POOL_MAX_SIZE`` to
        ``max_overflow``.

        Args:
            settings: 애플리케이션 설정 (Application settings)

        Returns:
            Database: 새 저장소 핸들 (New store handle)
        """
        pool_size: int = max(settings.DB_POOL_MIN_SIZE, 1)
        max_overflow: int = max(settings.DB_POOL_MAX_SIZE - pool_size, 0)

        connect_args: dict = {}
        if make_url(settings.DATABASE_URL).get_driver_name() == "asyncpg":
            connect_args = {
                "timeout": settings.DB_CONNECT_TIMEOUT,
                # PgBouncer/Supavisor 트랜잭션 모드 풀러에서 prepared statement 비활성화
                "statement_cache_size": 0,
            }

        engine: AsyncEngine = create_async_engine(
            settings.DATABASE_URL,
            echo=settings.DEBUG,
            # pool_pre_ping=True: 커넥션 풀에서 꺼낸 연결의 유효성을 사전 확인 (Validates connections before use)
            pool_pre_ping=True,
            pool_size=pool_size,
            max_overflow=max_overflow,
            connect_args=connect_args,
        )
        return cls(engine)

    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """요청 단위 세션을 생성하고 종료 시 닫습니다.

        Yield one session per request; uncommitted work is rolled back on close.
        """
        async with self.session_factory() as session:
            try:
                yield session
            finally:
                await session.close()

    async def dispose(self) -> None:
        """커넥션 풀을 닫습니다 (Close every pooled connection)."""
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session taken from the
    ``Database`` handle stored on ``app.state`` by the entry point.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    database: Database = request.app.state.database
    async for session in database.session():
        yield session
