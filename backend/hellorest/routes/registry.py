"""
HelloRest — Route Table Registry
=================================

What:  Declarative route descriptors and the function that mounts them on a
       FastAPI router.
Why:   The whole REST surface reads as one ordered table (method, path,
       consumes, produces, handler) instead of decorators scattered across
       modules.
How:   Each route module exports a tuple of `Route`; `build_router()` turns the
       concatenated table into `APIRouter.add_api_route()` calls under the
       configured context path.

Binding rules:
    consumes  → enforced by a route dependency; a mismatching Content-Type
                raises UnsupportedMediaTypeError (→ error normalizer → 503)
    produces  → selects the response class (text/plain or application/json);
                routes without it render through `bind_response()` instead
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Type

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from hellorest.exceptions import UnsupportedMediaTypeError

logger = logging.getLogger(__name__)

MEDIA_TYPE_FORM = "application/x-www-form-urlencoded"
MEDIA_TYPE_JSON = "application/json"
MEDIA_TYPE_TEXT = "text/plain"

_RESPONSE_CLASSES: Dict[str, Type[Response]] = {
    MEDIA_TYPE_JSON: JSONResponse,
    MEDIA_TYPE_TEXT: PlainTextResponse,
}


@dataclass(frozen=True)
class Route:
    """One row of the route table. Immutable once declared."""

    method: str
    path: str
    endpoint: Callable[..., Any]
    consumes: Optional[str] = None
    produces: Optional[str] = None
    response_model: Any = None
    summary: Optional[str] = None


def media_type_of(content_type: Optional[str]) -> Optional[str]:
    """`application/json; charset=utf-8` → `application/json`."""
    if not content_type:
        return None
    return content_type.split(";", 1)[0].strip().lower() or None


def require_content_type(expected: str) -> Callable[[Request], Any]:
    """Build a dependency that rejects requests not carrying `expected`."""

    async def check_content_type(request: Request) -> None:
        received = request.headers.get("content-type")
        if media_type_of(received) != expected:
            raise UnsupportedMediaTypeError(received=received, expected=expected)

    return check_content_type


def build_router(routes: Sequence[Route], prefix: str = "") -> APIRouter:
    """Mount every route of the table, in order, on a fresh router."""
    router = APIRouter(prefix=prefix)

    for route in routes:
        options: Dict[str, Any] = {}
        if route.produces in _RESPONSE_CLASSES:
            options["response_class"] = _RESPONSE_CLASSES[route.produces]
        if route.consumes:
            options["dependencies"] = [Depends(require_content_type(route.consumes))]

        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            response_model=route.response_model,
            summary=route.summary,
            **options,
        )
        logger.debug("Route registered: %s %s%s", route.method, prefix, route.path)

    return router
