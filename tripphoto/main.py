from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from .config import Settings, settings as default_settings
from .errors import ErrorKind, TripPhotoError
from .logging import setup_logging, RequestIdMiddleware
from .auth.security import TokenService
from .auth.router import router as auth_router
from .routes.uploads import router as uploads_router
from .routes.health import router as health_router
from .routes.dummy import router as dummy_router
from .services.uploads import UploadOrchestrator
from .storage import build_storage_provider


_UNSET = object()


async def _trip_photo_error_handler(request: Request, exc: TripPhotoError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "kind": exc.kind.value},
        headers=headers,
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request body", "kind": ErrorKind.MALFORMED_BODY.value, "errors": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Optional[Settings] = None, storage=_UNSET) -> FastAPI:
    """Build the app. ``storage`` overrides the configured provider (None means unavailable)."""
    settings = settings or default_settings
    setup_logging(settings.log_level, json_logs=settings.json_logs)
    app = FastAPI(title=settings.app_name)

    # Fatal when the signing key is missing
    app.state.settings = settings
    app.state.token_service = TokenService(
        settings.jwt_secret, algorithm=settings.jwt_algorithm, ttl_seconds=settings.jwt_ttl_seconds
    )
    if storage is _UNSET:
        storage = build_storage_provider(settings)
    app.state.storage = storage
    app.state.orchestrator = UploadOrchestrator(
        storage, settings.storage_destination, rollback_on_failure=settings.upload_rollback
    )

    # Middlewares
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "x-api-key", "Company", "X-Request-ID"],
    )

    limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    app.add_exception_handler(TripPhotoError, _trip_photo_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    # Routers
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(uploads_router)
    if settings.enable_dummy_endpoints:
        app.include_router(dummy_router)

    # Metrics
    if settings.enable_metrics:
        Instrumentator().instrument(app).expose(app)

    structlog.get_logger(__name__).info(
        "app_created",
        storage_backend=settings.storage_provider.value,
        storage_ready=storage is not None,
        upload_auth=settings.require_upload_auth,
    )
    return app


app = create_app()
