"""
Jobly API - FastAPI application.

Middleware order: CORS → Correlation ID → Logging, then per-router JWT
decoding and role checks. Expected errors are rendered by the handlers below
and unexpected ones by LoggingMiddleware, both as
{"error": {"message": ..., "status": ...}}.
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Union

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from slowapi.errors import RateLimitExceeded

import app.models  # Force model registration with SQLAlchemy
from app.core.config import settings, describe_settings
from app.core.exceptions import AppException, UNEXPECTED_ERROR, error_response
from app.core.logging import setup_logging
from app.core.limiter import limiter
from app.core.middleware import CorrelationIdMiddleware, LoggingMiddleware
from app.database import init_db, SessionLocal
from app.core.init_system import init_system_data
from app.routers.api_router import api_router

# ============================================================================
# LOGGING SETUP
# ============================================================================
setup_logging()
logger = logging.getLogger(__name__)


# ============================================================================
# LIFESPAN MANAGEMENT
# ============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle manager.
    - Startup: Initialize database once
    - Shutdown: Cleanup resources
    """
    logger.info(f"Starting {settings.app_name} v{settings.version} ({settings.environment})", extra=describe_settings())

    try:
        init_db()
        logger.info("✓ Database initialized successfully")

        init_system_data()
    except Exception as e:
        logger.error(f"✗ Database initialization failed: {e}")
        raise

    yield  # Application runs here

    logger.info("Gracefully shutting down...")


# ============================================================================
# FASTAPI INSTANCE
# ============================================================================
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Jobly - companies, jobs and the users who apply to them",
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# ============================================================================
# RATE LIMITER
# ============================================================================
app.state.limiter = limiter

# ============================================================================
# MIDDLEWARE STACK
# Add in REVERSE order (last added runs first)
# ============================================================================
app.add_middleware(LoggingMiddleware)
app.add_middleware(CorrelationIdMiddleware)

# CORS (outermost - runs first on requests, last on responses)
# Bearer tokens travel in a header, so credentials (cookies) are not needed
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[settings.request_id_header, "X-Process-Time"],
)


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Schema failures are a 400 listing one message per problem."""
    errors = []
    for error in exc.errors():
        # loc is usually ('body', 'field_name') or ('query', 'field_name')
        loc = [str(part) for part in error["loc"][1:]]
        errors.append(f"{'.'.join(loc)}: {error['msg']}" if loc else error["msg"])

    logger.warning(f"Validation Error: {errors}", extra={"path": request.url.path})
    return error_response(status.HTTP_400_BAD_REQUEST, errors)


@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    """Handle domain-specific application exceptions."""
    logger.info(f"AppException: {exc.message}", extra={"code": exc.error_code, "path": request.url.path})
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded):
    logger.warning(f"Rate limit hit: {exc.detail}", extra={"path": request.url.path})
    return error_response(status.HTTP_429_TOO_MANY_REQUESTS, f"Rate limit exceeded: {exc.detail}")


@app.exception_handler(IntegrityError)
async def integrity_exception_handler(request: Request, exc: IntegrityError):
    """Constraint violations the services did not anticipate."""
    logger.warning(f"IntegrityError: {exc.orig}", extra={"path": request.url.path})
    return error_response(status.HTTP_400_BAD_REQUEST, "Request violates a data constraint")


@app.exception_handler(StarletteHTTPException)
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: Union[HTTPException, StarletteHTTPException]):
    """Handle standard HTTP exceptions, including unknown routes."""
    return error_response(
        exc.status_code,
        exc.detail if isinstance(exc.detail, str) else "Request failed",
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Last resort for failures raised outside LoggingMiddleware."""
    logger.exception("Unhandled server error", extra={"path": request.url.path})
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR)


# ============================================================================
# ROUTER INCLUSION
# ============================================================================
app.include_router(api_router, prefix=settings.api_prefix)


# ============================================================================
# OPERATIONAL ENDPOINTS (at root level)
# ============================================================================
@app.get("/", tags=["Health"])
def root():
    """API root endpoint."""
    return {
        "message": "Jobly API",
        "version": settings.version,
        "docs": "/docs",
    }


@app.get("/health", tags=["Health"])
def health_check():
    """Liveness probe for load balancers and orchestrators."""
    return {
        "status": "up",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.version,
        "environment": settings.environment,
    }


@app.get("/readiness", tags=["Health"])
def readiness_check():
    """Readiness probe - verifies database connectivity."""
    try:
        with SessionLocal() as session:
            session.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Readiness check failed: {e}")
        raise HTTPException(status_code=503, detail="Service not ready")
    return {
        "status": "ready",
        "components": {"database": "connected"},
    }
