"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.v1 import api_router
from app.core.config import get_settings
from app.db.session import engine
from app.services.auth_provider import AuthProviderError

settings = get_settings()
logger = logging.getLogger(__name__)

TRY_AGAIN = "Something went wrong. Please try again."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Schema is managed by Alembic; on shutdown dispose the pool."""
    logger.info("%s starting (%s)", settings.app_name, settings.environment)
    yield
    await engine.dispose()


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": TRY_AGAIN})


async def auth_provider_error_handler(request: Request, exc: AuthProviderError) -> JSONResponse:
    logger.exception("%s %s failed at the auth provider: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": TRY_AGAIN})


def create_application() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(AuthProviderError, auth_provider_error_handler)

    @app.get("/")
    def root():
        return {"status": "ok", "message": settings.app_name}

    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_application()
