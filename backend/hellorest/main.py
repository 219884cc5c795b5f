"""
HelloRest — FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn hellorest.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌─────────────────────┐  │
    │  │  Req ID  │→│ Logging  │→│  Error Normalizer   │  │
    │  └──────────┘ └──────────┘ └─────────────────────┘  │
    │                                                     │
    │  Route Table (under /camel):                        │
    │  ┌──────────────┐ ┌───────────────────────────────┐ │
    │  │ POST /forms  │ │ GET /say/hello[/...]          │ │
    │  └──────────────┘ └───────────────────────────────┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ anything raised in a route → 503 "error : …" │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from hellorest import __version__
from hellorest.config import settings
from hellorest.middleware.error_normalizer import ErrorNormalizerMiddleware, normalize_error
from hellorest.middleware.logging import RequestLoggingMiddleware
from hellorest.middleware.request_id import RequestIDMiddleware
from hellorest.routes import ROUTE_TABLE, health
from hellorest.routes.registry import build_router

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("HelloRest starting up...")
    logger.info(
        "Route table: %d routes under %s (binding mode: %s)",
        len(ROUTE_TABLE),
        settings.context_path or "/",
        settings.binding_mode.value,
    )
    for route in ROUTE_TABLE:
        logger.info("  %-4s %s%s", route.method, settings.context_path, route.path)
    logger.info("Server ready at http://%s:%d", settings.server_host, settings.server_port)

    yield

    logger.info("HelloRest shut down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _in_route_execution(request: Request) -> bool:
    """True once the router matched both the path and the method of a route."""
    route = request.scope.get("route")
    return route is not None and request.method in getattr(route, "methods", ())


def register_exception_handlers(app: FastAPI) -> None:
    """
    Route the exceptions FastAPI answers itself into the error normalizer.

    Everything else reaches ErrorNormalizerMiddleware directly.
        RequestValidationError         → normalized (503)
        HTTPException inside a route   → normalized (503)
        HTTPException from routing     → framework default (404 / 405)
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return normalize_error(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if not _in_route_execution(request):
            return await http_exception_handler(request, exc)
        return normalize_error(request, exc)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="HelloRest API",
        description=(
            "Sample REST routes: a greeting service and a token-exchange form echo, "
            "declared in one route table with a single error normalizer."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition (last added = outermost)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(ErrorNormalizerMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(build_router(ROUTE_TABLE, prefix=settings.context_path))
    app.include_router(health.router)

    return app


# uvicorn expects `hellorest.main:app` to be importable
app = create_app()
