"""
Exception handlers for the receipt processor API.

Expected failures are answered with plain-text bodies and a 4xx status;
anything else becomes a 500 JSON response and is reported to Sentry.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from receipt_processor.core.exceptions import (
    MalformedRequestBodyError,
    ReceiptNotFoundError,
    ReceiptValidationError,
)
from receipt_processor.core.observability import sentry_capture

logger = logging.getLogger(__name__)


def malformed_body_handler(request: Request, exc: MalformedRequestBodyError):
    return PlainTextResponse(exc.detail, status_code=HTTP_400_BAD_REQUEST)


def request_validation_handler(request: Request, exc: RequestValidationError):
    # Undecodable JSON and wrongly typed fields both land here
    logger.error("Failed to parse receipt body path=%s errors=%s", request.url.path, exc.errors())
    return malformed_body_handler(request, MalformedRequestBodyError())


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Bodies that are not valid UTF-8 fail before JSON decoding and arrive as a bare 400
    if exc.status_code == HTTP_400_BAD_REQUEST:
        logger.error("Failed to read receipt body path=%s detail=%s", request.url.path, exc.detail)
        return malformed_body_handler(request, MalformedRequestBodyError())
    return await http_exception_handler(request, exc)


def receipt_validation_handler(request: Request, exc: ReceiptValidationError):
    logger.warning("Invalid receipt data error=%s", exc)
    return PlainTextResponse(str(exc), status_code=HTTP_400_BAD_REQUEST)


def not_found_handler(request: Request, exc: ReceiptNotFoundError):
    logger.warning("Receipt not found id=%s", exc.receipt_id)
    return PlainTextResponse("Receipt not found", status_code=HTTP_404_NOT_FOUND)


def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error path=%s", request.url.path)
    sentry_capture(exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "details": str(exc),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(MalformedRequestBodyError, malformed_body_handler)
    app.add_exception_handler(ReceiptValidationError, receipt_validation_handler)
    app.add_exception_handler(ReceiptNotFoundError, not_found_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
