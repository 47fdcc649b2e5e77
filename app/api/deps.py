"""FastAPI 의존성 주입 모듈: 작업자 식별 및 조회 조건 파싱.

FastAPI dependency injection module: Actor identification and search
condition parsing.

Actor Flow:
    1. 클라이언트가 X-Actor-Id 헤더를 전송 (Client sends the actor header)
    2. 헤더가 없으면 DEFAULT_ACTOR_ID 사용, REQUIRE_ACTOR_ID=True이면 400
       (Absent header falls back to DEFAULT_ACTOR_ID, or 400 when required)
    3. 정수가 아니면 400 (Non-integer value is rejected with 400)

Condition Flow:
    1. 쿼리 문자열을 camelCase/snake_case 키 모두로 읽음
       (Query keys are accepted in either spelling)
    2. 목록 필드는 반복 키(ids=1&ids=2)와 쉼표 구분(ids=1,2) 모두 허용
       (List fields accept repeated keys and comma-separated values)
    3. 검증 실패 시 400 (Validation failure is a 400)
"""

from typing import Any, Awaitable, Callable, get_args, get_origin

from fastapi import Request
from pydantic import BaseModel, ValidationError
from pydantic.fields import FieldInfo

from app.config import settings
from app.database import get_db
from app.utils.exceptions import BadRequestError

__all__ = ["get_db", "get_actor_id", "condition_dependency"]


async def get_actor_id(request: Request) -> int:
    """요청 헤더에서 작업자 ID를 추출합니다.

    Resolve the acting user id from the actor header.

    Args:
        request: 현재 요청 (Current request)

    Returns:
        int: 작업자 ID (Actor id)

    Raises:
        BadRequestError: 헤더가 필수인데 없거나 정수가 아님
                         (Header required but absent, or not an integer)
    """
    raw: str | None = request.headers.get(settings.ACTOR_HEADER)
    if raw is None or not raw.strip():
        if settings.REQUIRE_ACTOR_ID:
            raise BadRequestError(f"{settings.ACTOR_HEADER} header is required")
        return settings.DEFAULT_ACTOR_ID
    try:
        return int(raw.strip())
    except ValueError:
        raise BadRequestError(f"{settings.ACTOR_HEADER} must be an integer")


def _is_list_field(field: FieldInfo) -> bool:
    annotation = field.annotation
    if get_origin(annotation) is list:
        return True
    return any(get_origin(arg) is list for arg in get_args(annotation))


def _query_data(request: Request, model: type[BaseModel]) -> dict[str, Any]:
    """쿼리 문자열에서 모델 필드에 해당하는 값만 추출합니다."""
    params = request.query_params
    data: dict[str, Any] = {}
    for name, field in model.model_fields.items():
        key = next((k for k in (field.alias, name) if k and k in params), None)
        if key is None:
            continue
        if _is_list_field(field):
            values = [
                part.strip()
                for raw in params.getlist(key)
                for part in raw.split(",")
                if part.strip()
            ]
            if values:
                data[name] = values
        else:
            data[name] = params[key]
    return data


def condition_dependency(model: type[BaseModel]) -> Callable[[Request], Awaitable[BaseModel]]:
    """조회 조건 파싱 의존성 팩토리.

    Dependency factory parsing the query string into ``model``.

    Args:
        model: 조회 조건 스키마 (Condition schema)

    Returns:
        FastAPI 의존성 함수: 조회 조건 인스턴스 반환 또는 400 발생
        (Dependency returning the condition or raising 400)
    """

    async def _parse(request: Request) -> BaseModel:
        try:
            return model.model_validate(_query_data(request, model))
        except ValidationError as exc:
            raise BadRequestError(str(exc))

    return _parse
