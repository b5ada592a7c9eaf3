"""FastAPI application entry point."""

import sys
import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.routes.router import api_router
from app.core.config import Settings, get_settings
from app.core.events import create_start_handler, create_stop_handler
from app.core.exceptions import register_exception_handlers
from domains.candy_hub import CandyStore
from domains.core import ConfigurationError
from domains.core.logging import configure_logging, get_logger, bind_request_context, clear_request_context

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """每个请求一条 http_request 事件，并回写 X-Request-ID"""

    QUIET_PREFIXES = ("/health", "/docs", "/redoc", "/openapi.json")

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if path.startswith(self.QUIET_PREFIXES):
            return await call_next(request)

        request_id = uuid.uuid4().hex[:8]
        bind_request_context(request_id)
        started = time.perf_counter()
        fields = {"method": request.method, "path": path}

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "http_request_error",
                elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
                error_type=type(e).__name__,
                **fields,
            )
            raise
        finally:
            clear_request_context()

        logger.info(
            "http_request",
            request_id=request_id,
            status_code=response.status_code,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
            **fields,
        )
        response.headers["X-Request-ID"] = request_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    await create_start_handler(app)()
    yield
    await create_stop_handler(app)()


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Raises ConfigurationError when settings are not supplied and the
    environment lacks ADMIN_PASSWORD, so nothing is served without it.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="In-memory candy registry REST API",
        version=settings.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        # "/candies/" 是空 ID，按 404 处理而不是重定向
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.candy_store = CandyStore()

    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Request logging middleware (在 CORS 之后添加，先执行)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(api_router)

    register_exception_handlers(app)

    @app.get("/health")
    async def health_check(request: Request):
        return {
            "status": "healthy",
            "version": settings.VERSION,
            "candies": len(request.app.state.candy_store),
        }

    return app


def run() -> None:
    """Console entry point: validate configuration, then serve."""
    configure_logging(service_name="candy-api")

    try:
        settings = get_settings()
    except ConfigurationError as e:
        logger.error("configuration_error", error=e.message, **(e.details or {}))
        sys.exit(1)

    app = create_application(settings)

    logger.info("server_starting", host=settings.HOST, port=settings.PORT)
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
