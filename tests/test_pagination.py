"""페이지네이션 계산 테스트.

Pagination calculator tests: defaults, offset/limit, total page count,
rejection of non-positive input.
"""

import pytest

from app.schemas.common import PageInfo
from app.utils.exceptions import BadRequestError
from app.utils.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    normalize_page,
    to_offset_limit,
    total_pages,
)


class TestNormalizePage:
    """page/size 기본값 및 검증 테스트."""

    def test_defaults(self):
        """미지정 시 1페이지, 20개."""
        assert normalize_page(None, None) == (DEFAULT_PAGE, DEFAULT_PAGE_SIZE) == (1, 20)

    def test_partial_defaults(self):
        """하나만 지정하면 나머지는 기본값."""
        assert normalize_page(3, None) == (3, 20)
        assert normalize_page(None, 5) == (1, 5)

    @pytest.mark.parametrize("page, size", [(0, 20), (-1, 20), (1, 0), (1, -5)])
    def test_non_positive_rejected(self, page, size):
        """0 이하 값은 400."""
        with pytest.raises(BadRequestError) as exc_info:
            normalize_page(page, size)
        assert exc_info.value.status_code == 400


class TestOffsetAndTotals:
    """오프셋/전체 페이지 계산 테스트."""

    def test_first_page(self):
        """1페이지, 20개 → offset 0, limit 20."""
        assert to_offset_limit(1, 20) == (0, 20)

    def test_third_page(self):
        """3페이지, 20개 → offset 40."""
        assert to_offset_limit(3, 20) == (40, 20)

    def test_total_pages_rounds_up(self):
        """45건, 20개씩 → 3페이지."""
        assert total_pages(45, 20) == 3
        assert total_pages(40, 20) == 2
        assert total_pages(1, 20) == 1

    def test_total_zero(self):
        """0건이면 0페이지."""
        assert total_pages(0, 20) == 0

    def test_page_info_of(self):
        """PageInfo.of는 전체 페이지 수를 계산하고 camelCase로 직렬화."""
        info = PageInfo.of(page=3, size=20, total=45)
        assert info.total_page == 3
        assert info.model_dump(by_alias=True) == {
            "page": 3, "size": 20, "total": 45, "totalPage": 3,
        }
