"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the error taxonomy of
the damage tracker: unknown records, unsupported requests, illegal status
changes, and registration form validation failures.

Usage:
    from avarias.utils.exceptions import NotFoundError, MissingFieldsError
    raise NotFoundError("Damage record not found")
    raise MissingFieldsError(["sku", "responsible"])
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 기록을 찾을 수 없을 때 사용.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request is well-formed but cannot be served
    (e.g. an export format the service does not produce).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InvalidTransitionError(BadRequestError):
    """허용되지 않은 상태 전이 — Illegal damage status transition.

    Attributes:
        current: 현재 상태 (Current status)
        requested: 요청된 상태 (Requested status)
    """

    def __init__(self, current: str, requested: str) -> None:
        self.current: str = current
        self.requested: str = requested
        super().__init__(f"Cannot change status from '{current}' to '{requested}'")


class PhotoLimitExceededError(BadRequestError):
    """사진 개수 초과 — Attaching photos would exceed the per-record limit.

    The photo set that triggered the error is left unchanged.

    Attributes:
        limit: 허용 최대 개수 (Maximum number of photos)
        current: 현재 첨부된 개수 (Photos already attached)
        attempted: 추가하려던 개수 (Photos in the rejected batch)
    """

    def __init__(self, limit: int, current: int, attempted: int) -> None:
        self.limit: int = limit
        self.current: int = current
        self.attempted: int = attempted
        super().__init__(f"Máximo de {limit} fotos permitidas")


class MissingFieldsError(HTTPException):
    """422 필수 항목 누락 — Required registration fields are missing or blank.

    ``detail`` is a list with one entry per violated field so clients can
    highlight every input at once.

    Args:
        fields: 누락된 필드 이름 목록 (Names of the missing fields, in form order)
    """

    def __init__(self, fields: list[str]) -> None:
        self.fields: list[str] = list(fields)
        super().__init__(
            status_code=422,
            detail=[{"field": name, "error": "required"} for name in self.fields],
        )
