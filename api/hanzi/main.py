from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging
import os
import traceback
from hanzi.core.config import settings
from hanzi.core.database import init_db
from hanzi.core.exceptions import (
    HanziException,
    ValidationError,
    NotFoundError,
    ConflictError,
    AuthenticationError,
)

# Register the tables with SQLModel metadata before init_db runs
from hanzi.models import models  # noqa: F401

from hanzi.api.v1 import api_router

logger = logging.getLogger(__name__)

IS_DEVELOPMENT = os.getenv("ENVIRONMENT", "production").lower() in ("development", "dev", "local")

# Application error -> HTTP status; subclasses are checked in order
STATUS_BY_EXCEPTION = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables, then serve."""
    init_db()
    logger.info("Hanzi Trainer API started")
    yield


app = FastAPI(title="Hanzi Trainer API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed path, query or body values (e.g. a non-numeric index) are client errors."""
    body = await request.body()
    logger.warning(f"Request validation failed on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.errors(), "body": body.decode('utf-8') if body else None},
    )


@app.exception_handler(HanziException)
async def hanzi_exception_handler(request: Request, exc: HanziException):
    """Map service-layer errors to their HTTP status."""
    status_code = next(
        (code for exc_type, code in STATUS_BY_EXCEPTION if isinstance(exc, exc_type)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    logger.warning(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "type": type(exc).__name__},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Storage failures and bugs: 500, with details only in development."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)

    if IS_DEVELOPMENT:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": str(exc),
                "type": type(exc).__name__,
                "traceback": traceback.format_exc()
            },
        )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal server error occurred. Please try again later.",
            "type": "InternalServerError"
        },
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    return {
        "message": "Hanzi Trainer API",
        "status": "running",
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        }
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}


app.include_router(api_router, prefix=settings.api_v1_prefix)
