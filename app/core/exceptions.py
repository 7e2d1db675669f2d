from typing import List, Union

from fastapi.responses import JSONResponse

Message = Union[str, List[str]]

UNEXPECTED_ERROR = "An unexpected server error occurred."


def error_response(status_code: int, message: Message) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
    )


class AppException(Exception):
    def __init__(
        self,
        message: Message,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR",
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(self.message)


class BadRequestError(AppException):
    def __init__(self, message: Message = "Bad Request"):
        super().__init__(
            message=message,
            status_code=400,
            error_code="BAD_REQUEST"
        )


class UnauthorizedError(AppException):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTH_FAILED"
        )


class ForbiddenError(AppException):
    """Logged in, but not allowed. Distinct from Python's built-in PermissionError."""
    def __init__(self, message: str = "You must be an admin to perform this action."):
        super().__init__(
            message=message,
            status_code=403,
            error_code="PERMISSION_DENIED"
        )


class NotFoundError(AppException):
    def __init__(self, message: str = "Not Found"):
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND"
        )
