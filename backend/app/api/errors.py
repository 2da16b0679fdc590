"""
API error handlers

Every failure leaves the API as `{"error": "<message>"}`:
- ChatServiceError subclasses map to 400 / 404 / 403
- Body validation failures map to 400 with the route's missing-field message
  instead of FastAPI's 422
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config.constants import ERR_INVALID_BODY, ERR_MISSING_FIELDS, ERR_MISSING_CHAT_FIELDS
from app.services.exceptions import (
    ChatServiceError,
    InvalidRequestError,
    NotFoundError,
    ForbiddenError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    InvalidRequestError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
}

# (method, path) -> message for a body that does not fit the route's schema
BODY_ERROR_BY_ROUTE = {
    ("POST", "/messages"): ERR_MISSING_FIELDS,
    ("POST", "/chats"): ERR_MISSING_CHAT_FIELDS,
}


def status_for(exc: ChatServiceError) -> int:
    for error_type, code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def body_error_for(request: Request) -> str:
    path = request.url.path.rstrip("/") or "/"
    return BODY_ERROR_BY_ROUTE.get((request.method, path), ERR_INVALID_BODY)


async def chat_service_error_handler(request: Request, exc: ChatServiceError) -> JSONResponse:
    code = status_for(exc)
    logger.info(f"{request.method} {request.url.path} -> {code}: {exc.message}")
    return JSONResponse(status_code=code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> 400: {exc.errors()}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": body_error_for(request)})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ChatServiceError, chat_service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
