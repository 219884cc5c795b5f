"""
HelloRest — Error Normalizer
=============================

What:  Converts ANY exception raised while a route executes into one fixed
       failure response.
How:   ErrorNormalizerMiddleware wraps every request in an ExchangeContext and
       catches whatever escapes the app below it. Exceptions FastAPI answers
       itself (request validation, HTTPException raised inside a matched
       route) are routed here by the handlers registered in main.py.

Failure response (same for every exception type):
    status   settings.error_status_code (503)
    body     "error : <exception message>"   (text/plain)
    headers  every inbound request header, minus body framing
             (content-length, content-type, ...), plus X-Request-ID

No per-route override, no retries. A failed exchange is terminal.
"""

import logging

from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from hellorest.config import settings
from hellorest.exceptions import HelloRestError
from hellorest.exchange import ExchangeContext
from hellorest.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

ERROR_BODY_FORMAT = "error : %s"


def exception_message(exc: BaseException) -> str:
    if isinstance(exc, HelloRestError):
        return exc.message
    if isinstance(exc, RequestValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
    if isinstance(exc, StarletteHTTPException):
        return str(exc.detail)
    return str(exc)


def normalize_error(request: Request, exc: BaseException) -> Response:
    """Capture `exc` on the request's exchange and build the failure response."""
    exchange = ExchangeContext.of(request)
    exchange.capture(exc)
    exchange.copy_request_headers()
    exchange.body = ERROR_BODY_FORMAT % exception_message(exc)

    logger.error(
        "[%s] %s %s failed: %s",
        request_id_var.get(""),
        request.method,
        request.url.path,
        exchange.body,
        exc_info=exc,
        extra={"context": getattr(exc, "context", None)},
    )
    return exchange.to_response(settings.error_status_code)


class ErrorNormalizerMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        ExchangeContext.of(request)
        try:
            return await call_next(request)
        except Exception as exc:
            return normalize_error(request, exc)
