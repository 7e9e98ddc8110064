"""FastAPI application entrypoint. No business logic; only wiring, lifecycle and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_exception_handlers
from app.api.v1 import router as v1_router
from app.api.v1.health import API_VERSION
from app.core.config import settings
from app.core.logging import configure_logging
from app.core.session_cache import SessionCache

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the session cache on startup and close it on shutdown."""
    cache = SessionCache(settings.REDIS_URL, socket_timeout=settings.REDIS_SOCKET_TIMEOUT_SEC)
    cache.connect()
    app.state.session_cache = cache
    logger.info(
        "API started in %s mode",
        settings.APP_ENV,
        extra={"session_cache_ready": cache.is_ready},
    )
    try:
        yield
    finally:
        cache.close()
        logger.info("API shut down")


app = FastAPI(
    title="CI/CD Dashboard API",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Access log: one line per request with method, path, status and duration."""
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "%s %s %s",
        request.method,
        request.url.path,
        response.status_code,
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            "client": request.client.host if request.client else None,
        },
    )
    return response


register_exception_handlers(app)
app.include_router(v1_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root() -> dict[str, object]:
    """Root route; discovery payload listing the API sections."""
    prefix = settings.API_V1_PREFIX
    return {
        "message": "CI/CD Dashboard API",
        "version": API_VERSION,
        "endpoints": {
            "health": f"{prefix}/health",
            "auth": f"{prefix}/auth",
            "users": f"{prefix}/users",
            "pipelines": f"{prefix}/pipelines",
            "deployments": f"{prefix}/deployments",
            "metrics": f"{prefix}/metrics",
        },
    }
