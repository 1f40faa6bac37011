import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from evcharge.core.config import Settings, settings, DEFAULT_SECRET_KEY
from evcharge.core.database import AsyncSessionLocal, init_db
from evcharge.core.errors import AppError, AuthError, InternalError, NotFoundError, ValidationError
from evcharge.core.logging import configure_logging
from evcharge.api import api_router
from evcharge.services.seed import seed_database

logger = logging.getLogger(__name__)


def validate_production_secrets(config: Settings) -> None:
    """Refuse to start a production deployment with the development signing secret."""
    if config.environment != "production":
        return
    if not config.secret_key or config.secret_key == DEFAULT_SECRET_KEY:
        raise RuntimeError("SECRET_KEY must be set in production")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    validate_production_secrets(settings)

    if settings.seed_on_startup:
        await init_db()
        async with AsyncSessionLocal() as session:
            inserted = await seed_database(session)
        logger.info(f"Database initialized (seeded {inserted})")
    yield


app = FastAPI(
    title=settings.app_name,
    description="EV charging station tracker API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(exc: AppError) -> JSONResponse:
    content: dict[str, Any] = {"message": exc.message}
    headers = None

    if isinstance(exc, InternalError) and exc.detail and settings.environment != "production":
        content["error"] = exc.detail
    if isinstance(exc, AuthError):
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


# Body messages for routes that word their missing-field error differently
BODY_ERROR_MESSAGES = {
    "/api/auth/login": "Email and password are required",
}


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema failures become 400s without echoing which field failed."""
    locations = {error["loc"][0] for error in exc.errors() if error.get("loc")}
    if "path" in locations:
        # Non-numeric ids cannot exist
        return error_response(NotFoundError())
    if "body" in locations:
        return error_response(ValidationError(BODY_ERROR_MESSAGES.get(request.url.path)))
    return error_response(ValidationError("Invalid query parameters"))


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return error_response(InternalError(detail=str(exc)))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(InternalError(detail=str(exc)))


app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check() -> dict[str, Any]:
    return {
        "status": "healthy",
        "version": "0.1.0",
        "environment": settings.environment,
    }
