"""Mapping of domain errors onto HTTP responses for API v1."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from assettrack.core.exceptions import AssetTrackException, ErrorCode
from assettrack.schemas.common import ErrorEnvelope

HTTP_422_UNPROCESSABLE = 422

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: HTTP_422_UNPROCESSABLE,
    ErrorCode.UNKNOWN_VALUE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.CONCURRENCY_TIMEOUT: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.PERSISTENCE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.CONFIGURATION_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.AUTHENTICATION_ERROR: status.HTTP_401_UNAUTHORIZED,
}


def map_domain_error(exc: AssetTrackException) -> tuple[int, ErrorEnvelope]:
    code = STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return code, ErrorEnvelope(**exc.to_dict())


async def _handle_domain_error(request: Request, exc: AssetTrackException) -> JSONResponse:
    code, envelope = map_domain_error(exc)
    headers = {"Retry-After": "1"} if exc.code is ErrorCode.CONCURRENCY_TIMEOUT else None
    return JSONResponse(status_code=code, content=envelope.model_dump(), headers=headers)


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": str(error.get("msg", ""))}
        for error in exc.errors()
    ]
    envelope = ErrorEnvelope(
        error_code=ErrorCode.VALIDATION_ERROR.value,
        detail=errors[0]["msg"] if errors else "Request validation failed.",
        details={"errors": errors},
    )
    return JSONResponse(status_code=HTTP_422_UNPROCESSABLE, content=envelope.model_dump())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AssetTrackException, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
