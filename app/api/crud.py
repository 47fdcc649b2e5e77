"""엔티티 CRUD 라우터 팩토리.

Entity CRUD router factory: builds the seven endpoints every entity
exposes from its descriptor:

    GET    /{slug}/list       조건 목록 조회 (List)
    GET    /{slug}/page       페이지 조회 (Paginated search)
    GET    /{slug}/{id}       단건 조회 (Get by id, data=null when absent)
    POST   /{slug}            생성 (Create, returns new id)
    PUT    /{slug}            부분 수정 (Update by recId, returns rows)
    PUT    /{slug}/delByIds   소프트 삭제 (Soft delete by recIds)
    DELETE /{slug}            물리 삭제 (Physical delete by recIds)
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import condition_dependency, get_actor_id, get_db
from app.repositories.descriptor import EntityDescriptor
from app.schemas.common import ApiResponse, PageData
from app.services.crud_service import CrudService
from app.utils.exceptions import DataAccessError


async def _commit(db: AsyncSession) -> None:
    try:
        await db.commit()
    except SQLAlchemyError as exc:
        raise DataAccessError(str(exc)) from exc


def build_crud_router(descriptor: EntityDescriptor) -> APIRouter:
    """디스크립터로부터 CRUD 라우터를 생성합니다.

    Build the CRUD router of one entity, mounted at ``/{slug}``.

    Args:
        descriptor: 엔티티 디스크립터 (Entity descriptor)

    Returns:
        APIRouter: 7개 엔드포인트를 가진 라우터 (Router with the seven endpoints)
    """
    service = CrudService(descriptor)
    condition_model = descriptor.condition
    dto_model = descriptor.dto
    vo_model = descriptor.vo
    parse_condition = condition_dependency(condition_model)

    router: APIRouter = APIRouter(prefix=f"/{descriptor.slug}", tags=[descriptor.title])

    # /list, /page는 /{record_id}보다 먼저 등록: registered before the id route
    @router.get("/list", response_model=ApiResponse[list[vo_model]])
    async def list_records(
        condition: Annotated[condition_model, Depends(parse_condition)],
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> Any:
        """조건에 맞는 목록을 조회합니다.

        List records matching the query-string condition.
        """
        return ApiResponse.ok(await service.list(db, condition))

    @router.get("/page", response_model=ApiResponse[PageData[vo_model]])
    async def page_records(
        condition: Annotated[condition_model, Depends(parse_condition)],
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> Any:
        """페이지 단위로 조회합니다.

        Paginated search; page and size default to 1 and 20.
        """
        return ApiResponse.ok(await service.page(db, condition))

    @router.get("/{record_id}", response_model=ApiResponse[vo_model])
    async def get_record(
        record_id: int,
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> Any:
        """ID로 단건 조회합니다. 없으면 data는 null."""
        return ApiResponse.ok(await service.get_by_id(db, record_id))

    @router.post("", response_model=ApiResponse[int])
    async def save_record(
        dto: Annotated[dto_model, Body()],
        db: Annotated[AsyncSession, Depends(get_db)],
        actor_id: Annotated[int, Depends(get_actor_id)],
    ) -> Any:
        """새 레코드를 생성합니다.

        Create a record and return its id.
        """
        record_id: int = await service.save(db, dto, actor_id)
        await _commit(db)
        return ApiResponse.ok(record_id)

    @router.put("", response_model=ApiResponse[int])
    async def update_record(
        dto: Annotated[dto_model, Body()],
        db: Annotated[AsyncSession, Depends(get_db)],
        actor_id: Annotated[int, Depends(get_actor_id)],
    ) -> Any:
        """recId 대상 레코드를 부분 수정합니다.

        Partially update the record named by ``recId``; returns rows affected.
        """
        rows: int = await service.update_by_id(db, dto, actor_id)
        await _commit(db)
        return ApiResponse.ok(rows)

    @router.put("/delByIds", response_model=ApiResponse[int])
    async def delete_records(
        dto: Annotated[dto_model, Body()],
        db: Annotated[AsyncSession, Depends(get_db)],
        actor_id: Annotated[int, Depends(get_actor_id)],
    ) -> Any:
        """recIds 대상 레코드를 소프트 삭제합니다."""
        rows: int = await service.delete_by_ids(db, dto, actor_id)
        await _commit(db)
        return ApiResponse.ok(rows)

    @router.delete("", response_model=ApiResponse[int])
    async def remove_records(
        dto: Annotated[dto_model, Body()],
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> Any:
        """recIds 대상 레코드를 물리 삭제합니다."""
        rows: int = await service.remove_by_ids(db, dto)
        await _commit(db)
        return ApiResponse.ok(rows)

    return router
