from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .container import ApplicationContainer
from .logging import configure_logging
from ..application.services.account_service import AccountService
from ..application.services.auth_service import AuthService
from ..infrastructure.persistence.sqlite import SQLitePersistence
from ..infrastructure.security.password import BcryptPasswordHasher
from ..infrastructure.security.tokens import JWTTokenService
from ..presentation.api.errors import register_exception_handlers
from ..presentation.api.routers import auth as auth_router
from ..presentation.api.routers import users as users_router

logger = logging.getLogger(__name__)

SERVICE_NAME = "Account Service"
SERVICE_VERSION = "1.0.0"

_DEFAULT_SECRETS = {"change-me", "change-me-refresh"}


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(
        title=SERVICE_NAME,
        version=SERVICE_VERSION,
        docs_url=f"{settings.api_prefix}/docs",
        openapi_url=f"{settings.api_prefix}/docs.json",
        redoc_url=None,
        lifespan=_create_lifespan(settings),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.is_development:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            logger.info("%s %s", request.method, request.url.path)
            return await call_next(request)

    register_exception_handlers(app, settings)

    api = APIRouter(prefix=settings.api_prefix)
    api.include_router(auth_router.router)
    api.include_router(users_router.router)
    api.add_api_route("/health", _health, methods=["GET"], tags=["Health"])
    app.include_router(api)

    if settings.api_prefix:
        app.add_api_route("/health", _health, methods=["GET"], tags=["Health"])

    @app.get("/", include_in_schema=False)
    async def root() -> Dict[str, Any]:
        return {
            "message": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "documentation": f"{settings.api_prefix}/docs",
        }

    return app


async def _health(request: Request) -> Dict[str, Any]:
    started = getattr(request.app.state, "started_at", None)
    uptime = time.monotonic() - started if started is not None else 0.0
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(uptime, 3),
    }


def build_container(settings: Settings) -> ApplicationContainer:
    """Wire persistence, security services and flows for the given settings."""
    if settings.jwt_secret in _DEFAULT_SECRETS or settings.jwt_refresh_secret in _DEFAULT_SECRETS:
        logger.warning(
            "JWT secrets are using default values. Configure JWT_SECRET and JWT_REFRESH_SECRET in production."
        )
    persistence = SQLitePersistence(settings.database_path)
    password_hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
    token_service = JWTTokenService(
        access_secret=settings.jwt_secret,
        refresh_secret=settings.jwt_refresh_secret,
        access_ttl=settings.jwt_expires_in,
        refresh_ttl=settings.jwt_refresh_expires_in,
    )
    return ApplicationContainer(
        settings=settings,
        persistence=persistence,
        password_hasher=password_hasher,
        token_service=token_service,
        auth_service=AuthService(persistence, password_hasher, token_service),
        account_service=AccountService(persistence, password_hasher),
    )


def _create_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging()
        container = build_container(settings)
        app.state.container = container  # type: ignore[attr-defined]
        app.state.started_at = time.monotonic()  # type: ignore[attr-defined]
        logger.info("%s started (%s) with database %s", SERVICE_NAME, settings.environment, settings.database_path)
        try:
            yield
        finally:
            container.persistence.close()

    return lifespan
