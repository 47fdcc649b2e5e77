"""API 라우터 패키지: 등록된 모든 엔티티의 CRUD 라우터 통합.

API router package. Aggregates one CRUD router per registered entity.
"""

from fastapi import APIRouter

from app.api.crud import build_crud_router
from app.registry import ENTITIES

api_router: APIRouter = APIRouter()

for _entity in ENTITIES:
    api_router.include_router(build_crud_router(_entity))
