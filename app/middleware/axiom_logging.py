"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Captures request/response data and sends structured logs to Axiom.
Logs: method, path, entity slug, data (body/params), HTTP status and
duration; failed requests also carry the envelope code and message.
Sensitive fields (password, token, secret) are automatically masked.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings
from app.registry import get_entity

logger = logging.getLogger(__name__)

# 마스킹 대상 필드 패턴: Fields to mask in request/response bodies
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|id_card|idcard|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로: Paths excluded from logging
_SKIP_PATHS = {"/", "/health", "/docs", "/redoc", "/openapi.json"}


def _mask_dict(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹: Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else _mask_dict(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask_dict(item, depth + 1) for item in data[:20]]
    return data


def _truncate(value: Any, max_len: int = 2000) -> Any:
    """로그 크기 제한: Truncate large values to prevent oversized logs."""
    if isinstance(value, str) and len(value) > max_len:
        return value[:max_len] + "...(truncated)"
    return value


def _entity_of(path: str, prefix: str = "") -> str | None:
    """경로에서 등록된 엔티티 슬러그 추출: "/role/page" → "role", 미등록이면 None."""
    if prefix and path.startswith(prefix):
        path = path[len(prefix):]
    segment = path.strip("/").split("/", 1)[0]
    try:
        return get_entity(segment).slug
    except KeyError:
        return None


async def _json_body(request: Request) -> Any:
    """쓰기 요청 본문을 마스킹된 JSON으로 읽습니다 (Masked JSON request body)."""
    if request.method not in ("POST", "PUT", "PATCH", "DELETE"):
        return None
    try:
        raw = await request.body()
        return _truncate(_mask_dict(json.loads(raw))) if raw else None
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"


async def _unwrap_envelope(response: Response) -> tuple[Response, int | None, str | None]:
    """에러 응답 본문에서 봉투 code/msg를 꺼내고 응답을 다시 만듭니다.

    Read an error response's envelope. The streamed body is consumed, so a
    new response carrying the same bytes is returned in its place.
    """
    body = b""
    async for chunk in response.body_iterator:
        body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")

    code: int | None = None
    try:
        envelope = json.loads(body)
        code = envelope.get("code")
        msg = str(envelope.get("msg", envelope))[:500]
    except (json.JSONDecodeError, UnicodeDecodeError, AttributeError):
        msg = body.decode("utf-8", errors="replace")[:500]

    rebuilt = Response(
        content=body,
        status_code=response.status_code,
        headers=dict(response.headers),
        media_type=response.media_type,
    )
    return rebuilt, code, msg


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware shipping one event per API request to Axiom. Without an
    Axiom token the request passes through and only a debug line goes to
    the stdlib logger.

    Args:
        app: ASGI 앱 (Wrapped ASGI app)
        client: Axiom 클라이언트, None이면 설정값으로 생성 (Client; built from settings when None)
        dataset: 데이터셋 이름 (Target dataset)
    """

    def __init__(
        self,
        app: Any,
        client: AxiomClient | None = None,
        dataset: str | None = None,
    ) -> None:
        super().__init__(app)
        self._client: Any = client
        self._dataset: str = dataset or settings.AXIOM_DATASET

        if self._client is None and settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    def _ingest(self, event: dict[str, Any]) -> None:
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            # 전송 실패는 경고만 남김 (Ingest failure never fails the request)
            logger.warning("Axiom ingest failed for %s %s", event["method"], event["path"], exc_info=True)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in _SKIP_PATHS:
            return await call_next(request)

        if not self._client:
            response = await call_next(request)
            logger.debug("%s %s -> %s", request.method, path, response.status_code)
            return response

        started = time.perf_counter()
        event: dict[str, Any] = {
            "method": request.method,
            "path": path,
            "entity": _entity_of(path, settings.API_PREFIX),
            "status_code": 500,
        }
        if request.query_params:
            event["query_params"] = _mask_dict(dict(request.query_params))
        request_body = await _json_body(request)
        if request_body is not None:
            event["request_body"] = request_body

        try:
            response = await call_next(request)
            event["status_code"] = response.status_code
            if response.status_code >= 400:
                response, event["envelope_code"], event["error"] = await _unwrap_envelope(response)
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            self._ingest(event)

        return response
