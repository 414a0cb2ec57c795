from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from .errors import TaskValidationError
from .routers import tasks as tasks_router
from .settings import Settings, get_settings
from .store import TaskStore

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "tasks", "description": "Create, read, toggle, update and delete tasks."},
]


def _validation_body(message: str, detail: object) -> dict:
    return {"error": "ValidationError", "message": message, "detail": detail}


# PUBLIC_INTERFACE
def create_app(store: Optional[TaskStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Task store owned by this application. A fresh empty store is
            created when omitted.
        settings: Settings to use; read from the environment when omitted.

    Returns:
        A configured FastAPI instance with the store on ``app.state.store``.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Task Tracker API",
        description="In-memory task tracking backend.",
        version="0.1.0",
        openapi_tags=openapi_tags,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
    )
    app.state.store = store if store is not None else TaskStore()
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """
        Missing or malformed request fields are reported as 400 with the
        standard error envelope. A path id that is not an integer matches no
        task and is reported as 404.
        """
        errors = exc.errors()
        if errors and all(err.get("loc", ("",))[0] == "path" for err in errors):
            return JSONResponse(status_code=404, content={"detail": tasks_router.NOT_FOUND})
        return JSONResponse(
            status_code=400,
            content=_validation_body("Request validation failed", jsonable_encoder(errors)),
        )

    @app.exception_handler(TaskValidationError)
    async def task_validation_handler(request: Request, exc: TaskValidationError) -> JSONResponse:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=400,
            content=_validation_body(exc.message, [{"loc": ["body", exc.field], "msg": exc.message}]),
        )

    @app.get("/health", summary="Health Check", tags=["health"])
    def health_check(request: Request):
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health and the number of stored tasks.
        """
        return {"message": "Healthy", "tasks": len(request.app.state.store)}

    @app.get("/", include_in_schema=False)
    def root(request: Request):
        if settings.docs_enabled:
            return RedirectResponse(url="/docs")
        return health_check(request)

    app.include_router(tasks_router.router, prefix=settings.api_root)
    return app


app = create_app()
