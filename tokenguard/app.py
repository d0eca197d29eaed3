"""
FastAPI Application Entry Point
-------------------------------
Main application initialization and configuration.
Builds the signing key, token codec and validator once, then registers
routers, the authentication middleware and the exception handlers.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from tokenguard.api import auth_endpoints, health_endpoints
from tokenguard.auth.jwt_utils import Clock, TokenCodec
from tokenguard.auth.middleware import JwtAuthenticationMiddleware
from tokenguard.auth.token_validator import TokenValidator
from tokenguard.core.config_manager import ApplicationSettings, settings
from tokenguard.core.logger_setup import configure_logger
from tokenguard.errors.handlers import register_exception_handlers
from tokenguard.services.auth_service import AuthService
from tokenguard.services.user_store import InMemoryUserStore, UserCredentialStore
from tokenguard.utils.password_hashing import PasswordHasher


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    app_settings: ApplicationSettings = app.state.settings

    logger.info(f"Starting {app_settings.app_name} v{app_settings.app_version}")
    logger.info(f"Debug mode: {app_settings.debug}")
    logger.info(f"Token signing algorithm: {app.state.token_codec.algorithm}")
    logger.info("[SUCCESS] Application startup complete")

    yield

    logger.info("Application shutdown complete")


def create_app(
    app_settings: Optional[ApplicationSettings] = None,
    user_store: Optional[UserCredentialStore] = None,
    clock: Optional[Clock] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use (module-level settings when omitted)
        user_store: Credential store behind login/refresh (in-memory when omitted)
        clock: Time source for token issue and expiry checks (UTC now when omitted)

    Returns:
        FastAPI: Configured application
    """
    app_settings = app_settings or settings

    # Signing key is derived here, before any request can be served
    token_codec = TokenCodec.from_settings(app_settings, clock=clock)
    token_validator = TokenValidator(token_codec)
    password_hasher = PasswordHasher(rounds=app_settings.bcrypt_rounds)
    if user_store is None:
        user_store = InMemoryUserStore(password_hasher)

    # No debug flag: unhandled errors must always reach the catch-all handler
    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.app_version,
        description="Bearer token issuing, validation and structured auth errors",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.state.settings = app_settings
    app.state.token_codec = token_codec
    app.state.token_validator = token_validator
    app.state.user_store = user_store
    app.state.auth_service = AuthService(
        token_codec, token_validator, user_store, password_hasher
    )

    app.add_middleware(
        JwtAuthenticationMiddleware,
        token_validator=token_validator,
        public_paths=app_settings.public_paths,
        default_locale=app_settings.error_message_locale,
    )
    register_exception_handlers(app, app_settings)

    app.include_router(health_endpoints.router)
    app.include_router(auth_endpoints.router)

    @app.get("/")
    async def root():
        """Root endpoint with basic information."""
        return {
            "name": app_settings.app_name,
            "version": app_settings.app_version,
            "status": "running",
            "docs": "/api/docs",
        }

    return app


configure_logger()
app = create_app()
