"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Normalizes page/size input, converts it to OFFSET/LIMIT, derives the total
page count, and runs the two-statement (count, then fetch) page query.
"""

import math
from typing import Any, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.utils.exceptions import BadRequestError

DEFAULT_PAGE: int = 1  # 기본 페이지 번호 (Default page, 1-indexed)
DEFAULT_PAGE_SIZE: int = 20  # 기본 페이지 크기 (Default page size)


def normalize_page(page: int | None, size: int | None) -> tuple[int, int]:
    """페이지 번호와 크기에 기본값을 채우고 검증합니다.

    Fill in defaults for absent page/size and reject non-positive values.

    Args:
        page: 요청 페이지 번호, None이면 1 (Requested page, None → 1)
        size: 요청 페이지 크기, None이면 20 (Requested size, None → 20)

    Returns:
        tuple[int, int]: (page, size)

    Raises:
        BadRequestError: page 또는 size가 1 미만일 때 (page or size < 1)
    """
    page = DEFAULT_PAGE if page is None else page
    size = DEFAULT_PAGE_SIZE if size is None else size
    if page < 1:
        raise BadRequestError("page must be greater than or equal to 1")
    if size < 1:
        raise BadRequestError("size must be greater than or equal to 1")
    return page, size


def to_offset_limit(page: int, size: int) -> tuple[int, int]:
    """(page, size)를 (offset, limit)으로 변환합니다."""
    return (page - 1) * size, size


def total_pages(total: int, size: int) -> int:
    """전체 페이지 수: ceil(total / size), total이 0이면 0."""
    if total <= 0:
        return 0
    return math.ceil(total / size)


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page: int = DEFAULT_PAGE,
    size: int = DEFAULT_PAGE_SIZE,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy query, returning items and total count.
    Runs two independent statements: one for the total count (via subquery,
    no limit/offset) and one for the page of results with OFFSET/LIMIT.
    Under concurrent writes the two may disagree.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query to paginate)
        page: 요청 페이지 번호, 1부터 시작 (Page number, 1-indexed)
        size: 페이지당 항목 수 (Items per page)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수) 튜플
            (Tuple of paginated items and total count)
    """
    # 전체 개수 조회: 서브쿼리로 감싸서 COUNT 실행 (Count total via subquery)
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    # 페이지 항목 조회: OFFSET/LIMIT 적용 (Fetch page items with offset/limit)
    offset, limit = to_offset_limit(page, size)
    result = await db.execute(query.offset(offset).limit(limit))
    items: Sequence[Any] = result.scalars().all()

    return items, total
