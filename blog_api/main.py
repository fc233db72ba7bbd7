"""
Blog API Application Entry Point

FastAPI application main entry, including router registration and application configuration.
"""

import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError
from sqlalchemy.exc import InterfaceError, OperationalError

from blog_api import __version__
from blog_api.api import posts_router
from blog_api.common.errors import AppError, StoreUnavailableError, ValidationError
from blog_api.config import get_settings
from blog_api.db.redis import close_redis, init_redis
from blog_api.db.session import close_db, init_db
from blog_api.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Initialize logging configuration
setup_logging()


# Application Lifecycle Management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application Lifecycle Management

    Open the post store on startup, release it on shutdown.
    """
    settings = get_settings()
    if settings.POST_STORE_TYPE == "redis":
        await init_redis()
    else:
        await init_db()
    yield
    if settings.POST_STORE_TYPE == "redis":
        await close_redis()
    else:
        await close_db()


# Create FastAPI application
settings = get_settings()

app = FastAPI(
    title=settings.APP_NAME,
    description="CRUD service for blog posts",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
# Parse ALLOWED_ORIGINS from comma-separated string to list
allowed_origins_str = settings.ALLOWED_ORIGINS.strip()
if allowed_origins_str:
    allowed_origins = [origin.strip() for origin in allowed_origins_str.split(",") if origin.strip()]
elif settings.DEBUG:
    allowed_origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
else:
    allowed_origins = []

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global Exception Handlers
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """
    Handle application custom exceptions

    In production mode, error details are hidden to prevent information leakage.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(include_details=get_settings().DEBUG),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """
    Handle malformed or incomplete request bodies

    Always answers 400 with the field errors attached.
    """
    error = ValidationError(
        message="Request body is invalid",
        details={"errors": jsonable_encoder(exc.errors())},
    )
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(OperationalError)
@app.exception_handler(InterfaceError)
@app.exception_handler(RedisConnectionError)
@app.exception_handler(RedisTimeoutError)
async def store_unavailable_handler(request: Request, exc: Exception):
    """
    Handle post store connectivity failures

    Surfaced as 503; nothing is retried here.
    """
    logger.error("Post store unavailable on %s: %s", request.url.path, exc)
    error = StoreUnavailableError(details={"reason": type(exc).__name__})
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict(include_details=get_settings().DEBUG),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions

    In production mode, stack traces and error details are logged but not returned to clients.
    """
    logger.error(
        "Uncaught exception: %s\nPath: %s\nTraceback:\n%s",
        str(exc),
        request.url.path,
        traceback.format_exc(),
    )

    if get_settings().DEBUG:
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "message": str(exc),
                    "type": type(exc).__name__,
                    "code": "internal_error",
                    "traceback": traceback.format_exc().split("\n"),
                }
            },
        )

    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "message": "Internal server error",
                "type": "internal_error",
                "code": "internal_error",
            }
        },
    )


# Health Check Endpoint
@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health Check

    Used for service liveness probe.
    """
    return {"status": "healthy"}


# Register Routers
app.include_router(posts_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blog_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
