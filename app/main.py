"""FastAPI 애플리케이션 엔트리포인트: 미들웨어, 예외 처리, 라우터 등록.

FastAPI application entry point: Middleware, exception handlers and router
registration. ``create_app`` owns the ``Database`` handle lifecycle: it is
built at startup (unless one is injected), stored on ``app.state`` and
disposed at shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import api_router
from app.config import settings
from app.database import Database
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.schemas.common import ApiResponse
from app.utils.exceptions import DataAccessError

logger = logging.getLogger("app")


def _envelope(status_code: int, msg: str) -> JSONResponse:
    """실패 봉투를 JSON 응답으로 변환합니다 (Render a failure envelope)."""
    body = ApiResponse.fail(msg, code=status_code).model_dump(by_alias=True)
    return JSONResponse(status_code=status_code, content=body)


async def _data_access_handler(request: Request, exc: DataAccessError) -> JSONResponse:
    logger.error("Data access error on %s %s: %s", request.method, request.url.path, exc.detail, exc_info=exc)
    return _envelope(exc.status_code, str(exc.detail))


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _envelope(exc.status_code, str(exc.detail))


async def _validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # 본문/경로 파라미터 검증 실패는 호출자 오류: 400으로 응답
    errors = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return _envelope(400, errors or "Invalid request")


def create_app(database: Database | None = None) -> FastAPI:
    """애플리케이션을 생성합니다.

    Build the FastAPI application.

    Args:
        database: 주입할 저장소 핸들, None이면 설정값으로 생성
                  (Store handle to use; built from settings when None)

    Returns:
        FastAPI: 구성된 애플리케이션 (Configured application)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logging.basicConfig(
            level=settings.LOG_LEVEL.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        owned: bool = getattr(app.state, "database", None) is None
        if owned:
            app.state.database = Database.from_settings(settings)
        logger.info("%s started", settings.APP_NAME)
        try:
            yield
        finally:
            if owned:
                await app.state.database.dispose()
                app.state.database = None

    app: FastAPI = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    # 외부에서 주입된 핸들은 호출자가 닫음 (Injected handles are closed by the caller)
    app.state.database = database

    # Axiom API 로깅 미들웨어: 모든 요청을 캡처하도록 CORS보다 먼저 등록
    app.add_middleware(AxiomLoggingMiddleware)

    # CORS 미들웨어: Cross-Origin Resource Sharing middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 예외 처리: 모든 실패를 {code, msg, data: null} 봉투로 응답
    app.add_exception_handler(DataAccessError, _data_access_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_handler)

    @app.get("/")
    async def index() -> dict[str, str]:
        """서비스 이름을 반환합니다 (Greeting)."""
        return {"message": f"Welcome to {settings.APP_NAME}"}

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """서버 상태 확인 엔드포인트.

        Health check endpoint for load balancers and monitoring.
        """
        return {"status": "ok"}

    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app


app: FastAPI = create_app()
