"""응답 봉투 테스트.

Response envelope tests: success/failure shapes and camelCase output.
"""

from app.schemas.common import CODE_OK, ApiResponse, PageData, PageInfo
from app.schemas.permission import RoleVo


class TestApiResponse:
    """ApiResponse 생성 테스트."""

    def test_ok(self):
        """성공 응답은 code 200, msg success."""
        res = ApiResponse.ok(7)
        assert res.code == CODE_OK == 200
        assert res.msg == "success"
        assert res.data == 7

    def test_ok_without_data(self):
        """데이터 없는 성공 응답의 data는 None."""
        assert ApiResponse.ok().model_dump() == {"code": 200, "msg": "success", "data": None}

    def test_fail(self):
        """실패 응답은 data가 항상 None."""
        res = ApiResponse.fail("boom")
        assert (res.code, res.msg, res.data) == (500, "boom", None)
        assert ApiResponse.fail("bad", code=400).code == 400

    def test_page_payload_camel_case(self):
        """페이지 응답은 pageInfo/items, 항목은 camelCase 키."""
        vo = RoleVo(id=1, is_del=0, org_code="ORG01", name="admin")
        body = ApiResponse[PageData[RoleVo]].ok(
            PageData[RoleVo](page_info=PageInfo.of(1, 20, 1), items=[vo])
        ).model_dump(by_alias=True)
        assert body["data"]["pageInfo"]["totalPage"] == 1
        assert body["data"]["items"][0]["orgCode"] == "ORG01"
        assert body["data"]["items"][0]["isDel"] == 0
