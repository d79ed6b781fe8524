import logging
from typing import Any, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .middleware_request_id import REQUEST_ID_HEADER, current_request_id

logger = logging.getLogger("yestv.errors")


class AppError(Exception):
    """Base for errors that map onto a JSON error response."""

    code = "app_error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        self.details = details


class ValidationError(AppError):
    code = "validation_error"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(AppError):
    code = "storage_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class DeliveryError(AppError):
    code = "otp_delivery_failed"
    status_code = status.HTTP_502_BAD_GATEWAY


def error_body(code: str, message: str, details: Any = None, request_id: Optional[str] = None) -> dict:
    return {"error": {"code": code, "message": message, "details": details, "request_id": request_id}}


def error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: Any = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    req_id = current_request_id(request)
    out_headers = dict(headers or {})
    if req_id:
        out_headers[REQUEST_ID_HEADER] = req_id
    return JSONResponse(
        status_code=status_code,
        content=error_body(code, message, details, req_id),
        headers=out_headers or None,
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
    return error_response(request, exc.status_code, exc.code, exc.message, exc.details)


_HTTP_CODES = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    413: "payload_too_large",
}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _HTTP_CODES.get(exc.status_code, "http_error")
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = "Route not found."
    else:
        message = str(exc.detail)
    return error_response(request, exc.status_code, code, message, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return error_response(request, status.HTTP_400_BAD_REQUEST, "validation_error", "Invalid request.", details)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", "Internal server error.")
