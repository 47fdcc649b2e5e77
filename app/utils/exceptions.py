"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the two error families
of the CRUD engine. The application-level exception handlers in
``app.main`` render both into the response envelope.

Usage:
    from app.utils.exceptions import BadRequestError, DataAccessError
    raise BadRequestError("recIds is required")
    raise DataAccessError("connection refused")
"""

from fastapi import HTTPException, status


class BadRequestError(HTTPException):
    """400 Bad Request 예외: 호출자 계약 위반 시 사용.

    400 Bad Request exception.
    Raised when the caller breaks the request contract: a missing
    ``recId``/``recIds`` on update/delete, a non-positive page or size,
    or a malformed actor header.

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class DataAccessError(HTTPException):
    """500 Internal Server Error 예외: 저장소 계층 실패 시 사용.

    500 exception for any storage-layer failure (connectivity, constraint
    violation, malformed query). Not retried; propagates to the HTTP boundary.

    Args:
        detail: 원인 메시지 (Underlying driver/ORM message)
    """

    def __init__(self, detail: str = "Data access error") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
