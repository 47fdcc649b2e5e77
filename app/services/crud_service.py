"""제네릭 CRUD 서비스: 엔티티 공통 비즈니스 로직.

Generic CRUD Service: Business logic shared by every entity.
Validates write requests, converts Dto payloads into column values, calls
the descriptor's repository, and converts ORM rows into Vo schemas.
Transactions are committed by the router.
"""

from typing import Any

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.base import BaseRepository
from app.repositories.descriptor import EntityDescriptor
from app.schemas.common import ConditionBase, DtoBase, PageData
from app.utils.exceptions import BadRequestError

# Dto 중 컬럼이 아닌 대상 지정 필드: Targeting fields, never written to a column
_TARGET_FIELDS: set[str] = {"rec_id", "rec_ids"}


class CrudService:
    """엔티티 하나에 대한 CRUD 서비스.

    CRUD service for one entity.

    Attributes:
        descriptor: 엔티티 디스크립터 (Entity descriptor)
        repository: 엔티티 레포지토리 (Entity repository)
    """

    def __init__(self, descriptor: EntityDescriptor) -> None:
        self.descriptor: EntityDescriptor = descriptor
        self.repository: BaseRepository = descriptor.repository

    def _to_vo(self, row: Any) -> BaseModel:
        """ORM 모델을 읽기 스키마로 변환합니다 (Project a row into the Vo)."""
        return self.descriptor.vo.model_validate(row)

    def _values(self, dto: DtoBase) -> dict[str, Any]:
        """Dto에서 값이 있는 컬럼만 추출합니다.

        Column values carried by the Dto. Null fields are left out, so a
        partial update never overwrites columns the caller did not send.
        """
        return dto.model_dump(exclude_none=True, exclude=_TARGET_FIELDS)

    @staticmethod
    def _require_ids(dto: DtoBase) -> list[int]:
        if not dto.rec_ids:
            raise BadRequestError("recIds is required")
        return dto.rec_ids

    async def list(self, db: AsyncSession, condition: ConditionBase) -> list[BaseModel]:
        """조건에 맞는 목록을 조회합니다 (List matching rows)."""
        rows = await self.repository.list(db, condition)
        return [self._to_vo(row) for row in rows]

    async def page(self, db: AsyncSession, condition: ConditionBase) -> PageData:
        """페이지 단위로 조회합니다 (One page of matching rows plus metadata)."""
        rows, page_info = await self.repository.page(db, condition)
        return PageData[self.descriptor.vo](
            page_info=page_info, items=[self._to_vo(row) for row in rows]
        )

    async def get_by_id(self, db: AsyncSession, record_id: int) -> BaseModel | None:
        """ID로 조회합니다. 없거나 삭제된 경우 None."""
        row = await self.repository.get_by_id(db, record_id)
        return self._to_vo(row) if row is not None else None

    async def save(self, db: AsyncSession, dto: DtoBase, actor_id: int) -> int:
        """레코드를 생성하고 새 ID를 반환합니다.

        Create a row from the Dto and return its generated id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            dto: 쓰기 요청 (Write request)
            actor_id: 작업자 ID (Acting user id)

        Returns:
            int: 생성된 ID (New primary key)
        """
        return await self.repository.save(db, self._values(dto), actor_id)

    async def update_by_id(self, db: AsyncSession, dto: DtoBase, actor_id: int) -> int:
        """recId 대상 레코드를 부분 수정합니다.

        Partially update the row targeted by ``rec_id``.

        Raises:
            BadRequestError: recId 누락 (Missing recId)
        """
        if dto.rec_id is None:
            raise BadRequestError("recId is required")
        return await self.repository.update_by_id(db, dto.rec_id, self._values(dto), actor_id)

    async def delete_by_ids(self, db: AsyncSession, dto: DtoBase, actor_id: int) -> int:
        """recIds 대상 레코드를 소프트 삭제합니다.

        Raises:
            BadRequestError: recIds 누락 또는 빈 목록 (Missing or empty recIds)
        """
        return await self.repository.delete_by_ids(db, self._require_ids(dto), actor_id)

    async def remove_by_ids(self, db: AsyncSession, dto: DtoBase) -> int:
        """recIds 대상 레코드를 물리 삭제합니다 (Physical delete)."""
        return await self.repository.remove_by_ids(db, self._require_ids(dto))
