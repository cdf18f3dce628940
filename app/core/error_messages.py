# app/core/error_messages.py
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse


class AppError(Exception):
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, error: Optional[str] = None):
        self.message = message or self.message
        self.error = error
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"result": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class AuthRequired(AppError):
    status_code = 403
    message = "Token required"


class InvalidToken(AppError):
    status_code = 401
    message = "Invalid token"


class InvalidRequest(AppError):
    status_code = 400
    message = "Please fill out all mandatory fields"


class NotFound(AppError):
    status_code = 401
    message = "No User Found"


class InternalFailure(AppError):
    status_code = 500
    message = "Internal Server Error"


class ErrorResponses:
    """Messages shared by routes that build their own error instances."""

    REGISTRATION_FAILED = "Registration Failed"
    NO_RECORD_FOUND = "No Record Found"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
