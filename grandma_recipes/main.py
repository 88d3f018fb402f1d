"""
Grandma Recipes API: Application Entry Point
=============================================

What:  Builds the FastAPI application: logging, middleware, exception
       handlers and routers.
How:   `create_app()` factory; `app` is the instance served by uvicorn:

           uvicorn grandma_recipes.main:app --port 5001

Error mapping (global handlers):
    ValidationError          → 400  {success:false, error:"validation_error", ...}
    NotFoundError            → 200  {success:false, message}
    ConflictError            → 409
    InvalidCredentialsError  → 401
    UnauthorizedError        → 400
    StorageError             → 500  generic message, context logged
    anything else            → 500  generic message, stack trace logged
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from grandma_recipes import __version__
from grandma_recipes.config import settings
from grandma_recipes.database import dispose_engine
from grandma_recipes.exceptions import (
    ConflictError,
    GrandmaRecipesError,
    InvalidCredentialsError,
    NotFoundError,
    StorageError,
    UnauthorizedError,
    ValidationError,
)
from grandma_recipes.middleware.body_size import BodySizeLimitMiddleware
from grandma_recipes.middleware.logging import RequestLoggingMiddleware
from grandma_recipes.middleware.request_id import RequestIDMiddleware, request_id_var
from grandma_recipes.routes import grandmas, health, recipes, users

logger = logging.getLogger(__name__)


# ── Logging ─────────────────────────────────────────────────────────────────

def setup_logging() -> None:
    """
    Configure logging for the whole application.

    Format: 2024-01-15T12:00:00 [INFO] grandma_recipes.services.recipe_service: ...
    Called once from the lifespan, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ── Lifespan ────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Grandma Recipes API %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.warning("Configuration problem: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Grandma Recipes API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ── Exception Handlers ──────────────────────────────────────────────────────

def _error_body(code: str, exc: GrandmaRecipesError, rid: str, details=None) -> dict:
    body = {
        "success": False,
        "error": code,
        "message": exc.message,
        "request_id": rid,
    }
    if details is not None:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Response bodies never carry stack traces, SQL or password material;
    those are logged server-side only.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", exc, rid, details=exc.context),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        # Empty lookups are a normal outcome for clients: HTTP 200, success=false
        rid = request_id_var.get("")
        logger.debug("[%s] Not found: %s %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=200,
            content={"success": False, "message": exc.message, "request_id": rid},
        )

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        rid = request_id_var.get("")
        logger.info("[%s] Conflict: %s", rid, exc.message)
        return JSONResponse(status_code=409, content=_error_body("conflict", exc, rid))

    @app.exception_handler(InvalidCredentialsError)
    async def handle_invalid_credentials(request: Request, exc: InvalidCredentialsError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=401,
            content=_error_body("invalid_credentials", exc, rid),
        )

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        rid = request_id_var.get("")
        logger.info("[%s] Rejected %s %s: %s", rid, request.method, request.url.path, exc.message)
        return JSONResponse(status_code=400, content=_error_body("unauthorized", exc, rid))

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        rid = request_id_var.get("")
        logger.error("[%s] Storage error: %s | Context: %s", rid, exc.message, exc.context)
        details = {}
        if "error_type" in exc.context:
            details["error_type"] = exc.context["error_type"]
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": "server_error",
                "message": exc.message,
                "details": details,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again later.",
                "request_id": rid,
            },
        )


# ── Application Factory ─────────────────────────────────────────────────────

def create_app() -> FastAPI:
    app = FastAPI(
        title="Grandma Recipes API",
        description=(
            "Share family recipes together with the grandmothers who cooked them: "
            "browse and search recipes, manage grandmas and submit new recipes."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Added innermost first; the last one added wraps all the others
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(BodySizeLimitMiddleware)

    register_exception_handlers(app)

    app.include_router(recipes.router)
    app.include_router(grandmas.router)
    app.include_router(users.router)
    app.include_router(health.router)

    return app


app = create_app()
