"""기본 CRUD 레포지토리: 디스크립터 기반 제네릭 데이터 접근 계층.

Generic CRUD repository driven by an ``EntityDescriptor``.
One instance serves one entity; every entity shares the same query logic:
filtered list, paginated search, lookup by id, insert, partial update,
soft delete and physical delete.

Usage:
    repository = BaseRepository(role_descriptor)
    rows = await repository.list(db, RoleCondition(name="adm"))
"""

from typing import TYPE_CHECKING, Any, Sequence

from sqlalchemy import Executable, Result, Select, delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import ACTIVE, DELETED
from app.repositories.filters import compile_filter
from app.schemas.common import ConditionBase, PageInfo
from app.utils.exceptions import DataAccessError
from app.utils.pagination import normalize_page, paginate, to_offset_limit

if TYPE_CHECKING:
    from app.repositories.descriptor import EntityDescriptor


class BaseRepository:
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository. Holds no connection state; every method takes
    the request's ``AsyncSession``. Driver/ORM failures surface as
    :class:`DataAccessError`.

    Attributes:
        descriptor: 엔티티 디스크립터 (Entity descriptor)
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, descriptor: "EntityDescriptor") -> None:
        self.descriptor: "EntityDescriptor" = descriptor
        self.model: type = descriptor.model

    # === 내부 헬퍼 (Internal helpers) ===

    @property
    def _pk(self) -> Any:
        return getattr(self.model, self.descriptor.primary_key)

    @property
    def _is_del(self) -> Any:
        return getattr(self.model, self.descriptor.soft_delete_column)

    def _select(self, condition: ConditionBase) -> Select:
        """조회 조건으로 필터링된 기본 SELECT 쿼리 (기본키 정렬)."""
        where = compile_filter(
            self.model,
            self.descriptor.filters,
            condition,
            self.descriptor.soft_delete_column,
        )
        return select(self.model).where(where).order_by(self._pk)

    async def _execute(self, db: AsyncSession, statement: Executable) -> Result:
        try:
            return await db.execute(statement)
        except SQLAlchemyError as exc:
            raise DataAccessError(str(exc)) from exc

    # === 조회 (Read) ===

    async def list(self, db: AsyncSession, condition: ConditionBase) -> Sequence[Any]:
        """조건에 맞는 레코드 목록을 조회합니다.

        List rows matching the condition, ordered by primary key. OFFSET/LIMIT
        are applied only when the condition carries ``page`` or ``size``;
        no count query is issued.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 조회 조건 (Search condition)

        Returns:
            Sequence[Any]: 조회된 레코드 목록 (Matching rows)

        Raises:
            BadRequestError: page 또는 size가 1 미만 (page or size < 1)
            DataAccessError: DB 오류 (Storage failure)
        """
        query: Select = self._select(condition)
        if condition.page is not None or condition.size is not None:
            page, size = normalize_page(condition.page, condition.size)
            offset, limit = to_offset_limit(page, size)
            query = query.offset(offset).limit(limit)

        result = await self._execute(db, query)
        return result.scalars().all()

    async def page(
        self,
        db: AsyncSession,
        condition: ConditionBase,
    ) -> tuple[Sequence[Any], PageInfo]:
        """페이지네이션이 적용된 레코드 목록을 조회합니다.

        Count the matching rows, then fetch one page of them.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 조회 조건, page/size 미지정 시 1/20 (Condition; page/size default 1/20)

        Returns:
            tuple[Sequence[Any], PageInfo]: (현재 페이지 레코드, 페이지 메타데이터)
                                            (Rows of the page, pagination metadata)
        """
        page, size = normalize_page(condition.page, condition.size)
        try:
            items, total = await paginate(db, self._select(condition), page, size)
        except SQLAlchemyError as exc:
            raise DataAccessError(str(exc)) from exc
        return items, PageInfo.of(page, size, total)

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
        include_deleted: bool = False,
    ) -> Any | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single row by primary key. Soft-deleted rows are hidden
        unless ``include_deleted`` is set.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드 ID (Primary key)
            include_deleted: 삭제된 레코드 포함 여부 (Also return soft-deleted rows)

        Returns:
            Any | None: 조회된 레코드 또는 None (Found row or None)
        """
        query: Select = select(self.model).where(self._pk == record_id)
        if not include_deleted:
            query = query.where(self._is_del == ACTIVE)

        result = await self._execute(db, query)
        return result.scalar_one_or_none()

    # === 쓰기 (Write) ===

    async def save(self, db: AsyncSession, values: dict[str, Any], actor_id: int) -> int:
        """새 레코드를 생성하고 생성된 ID를 반환합니다.

        Insert one row. ``create_by``/``update_by`` are always set to the
        actor. Columns absent from ``values`` are left out of the INSERT, so
        the database (or the model's Python-side default) fills them.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            values: 컬럼명 → 값 딕셔너리 (Column values)
            actor_id: 작업자 ID (Acting user id)

        Returns:
            int: 생성된 기본키 (Generated primary key)
        """
        data: dict[str, Any] = {
            **values,
            self.descriptor.create_by_column: actor_id,
            self.descriptor.update_by_column: actor_id,
        }
        statement = insert(self.model).values(**data).returning(self._pk)
        result = await self._execute(db, statement)
        return result.scalar_one()

    async def update_by_id(
        self,
        db: AsyncSession,
        record_id: int,
        values: dict[str, Any],
        actor_id: int,
    ) -> int:
        """ID로 레코드의 일부 필드를 수정합니다.

        Update only the given columns plus ``update_by``. Returns the number
        of rows affected, 0 when the id does not exist.
        """
        statement = (
            update(self.model)
            .where(self._pk == record_id)
            .values(**values, **{self.descriptor.update_by_column: actor_id})
        )
        result = await self._execute(db, statement)
        return result.rowcount

    async def delete_by_ids(self, db: AsyncSession, record_ids: Sequence[int], actor_id: int) -> int:
        """소프트 삭제: 활성 레코드의 is_del을 -1로 설정합니다.

        Soft delete. Only active rows are marked, so repeating the call
        affects 0 rows.
        """
        statement = (
            update(self.model)
            .where(self._pk.in_(list(record_ids)), self._is_del == ACTIVE)
            .values(
                **{
                    self.descriptor.soft_delete_column: DELETED,
                    self.descriptor.update_by_column: actor_id,
                }
            )
        )
        result = await self._execute(db, statement)
        return result.rowcount

    async def remove_by_ids(self, db: AsyncSession, record_ids: Sequence[int]) -> int:
        """물리 삭제 (Physical delete). 삭제된 행 수를 반환합니다."""
        statement = (
            delete(self.model)
            .where(self._pk.in_(list(record_ids)))
        )
        result = await self._execute(db, statement)
        return result.rowcount
