"""
FastAPI application entry point for the Todo API.

This module:
- Configures the FastAPI application with middleware and routers
- Sets up structured logging with structlog
- Implements global exception handlers for consistent error responses
- Manages application lifecycle (table creation on startup)
- Configures CORS for browser-based todo clients
"""

import logging
import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from todo_api import __version__
from todo_api.api.routes import todo
from todo_api.config import settings
from todo_api.core.exceptions import TodoAPIError
from todo_api.models.database import create_tables

# ===== Structured Logging Configuration =====

logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        # JSON for production (machine-readable), Console for dev (human-readable)
        structlog.processors.JSONRenderer() if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer(),
    ],
    # Same threshold as the stdlib loggers so LOG_LEVEL filters both
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.log_level.upper())
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager for FastAPI application.

    Startup phase:
    - Log application start with configuration
    - Create the todos table if it does not exist yet

    Shutdown phase:
    - Log shutdown
    """
    logger.info(
        "application_starting",
        service="Todo API",
        version=__version__,
        environment=settings.app_env,
        log_level=settings.log_level,
        cors_origins=settings.cors_origins
    )
    create_tables()

    yield

    logger.info("application_shutting_down")


app = FastAPI(
    title="Todo API",
    description="CRUD REST backend for todo items",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ===== Middleware Configuration =====

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["Location"],
    max_age=600,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Log all incoming requests with timing information.

    Adds X-Process-Time header to response for debugging.
    """
    start_time = time.time()

    logger.info(
        "request_started",
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else "unknown",
    )

    response = await call_next(request)

    process_time = time.time() - start_time

    logger.info(
        "request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    response.headers["X-Process-Time"] = str(round(process_time, 3))
    return response


# ===== Global Exception Handlers =====


@app.exception_handler(TodoAPIError)
async def todo_api_error_handler(request: Request, exc: TodoAPIError):
    """
    Handle domain errors with structured responses.

    Response format:
    {
        "error": "TODO_001",
        "message": "Todo with id: '42' not found",
        "status_code": 404,
        "details": {"id": "42"}
    }
    """
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        "todo_api_error",
        error_code=exc.error_code.value,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
        path=request.url.path
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """
    Handle Pydantic validation errors with clear messages.

    Common causes:
    - Missing title on create
    - Empty title
    - Wrong field types or malformed JSON
    """
    logger.warning(
        "validation_error",
        errors=exc.errors(),
        body=str(exc.body)[:500],  # Truncate to avoid logging large payloads
        path=request.url.path
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "details": jsonable_encoder(exc.errors())
        }
    )


@app.exception_handler(Exception)
async def generic_error_handler(request: Request, exc: Exception):
    """
    Catch-all handler for unexpected exceptions.

    Logs the full exception and returns a response that does not leak internals.
    """
    logger.exception(
        "unexpected_error",
        error_type=type(exc).__name__,
        error_message=str(exc),
        path=request.url.path
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "INTERNAL_ERROR",
            "message": "An unexpected error occurred. Please try again later.",
            "reference_id": f"err_{int(time.time())}"
        }
    )


# ===== Router Registration =====

app.include_router(todo.router)

# ===== Core Endpoints =====


@app.get("/")
async def root():
    """Service information and endpoint map."""
    return {
        "service": "Todo API",
        "version": __version__,
        "status": "operational",
        "environment": settings.app_env,
        "documentation": "/docs" if not settings.is_production else None,
        "endpoints": {
            "health": "/health",
            "todos": "/todos",
            "pending": "/todos/pending"
        }
    }


@app.get("/health")
async def health():
    """Health check endpoint for load balancers and monitoring."""
    return {
        "status": "healthy",
        "environment": settings.app_env,
        "version": __version__,
        "timestamp": int(time.time())
    }
