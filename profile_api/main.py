# profile_api/main.py

from typing import Optional

import uvicorn
from fastapi import FastAPI

from profile_api.api.docs import router as docs_router
from profile_api.api.greeting import router as greeting_router
from profile_api.api.profiles import router as profiles_router
from profile_api.core.config import Settings, get_settings
from profile_api.core.errors import register_exception_handlers
from profile_api.core.logging import configure_logging, get_logger
from profile_api.core.middleware import RequestLoggingMiddleware

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application: API routers under the configured prefix,
    documentation routes, error handlers and request logging.
    """
    settings = settings or get_settings()
    configure_logging(log_level=settings.log_level, json_logs=settings.json_logs)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url=None,
        redoc_url=None,
    )
    app.state.settings = settings

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(greeting_router, prefix=settings.api_prefix)
    app.include_router(profiles_router, prefix=settings.api_prefix)
    if settings.docs_enabled:
        app.include_router(docs_router)

    register_exception_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)

    logger.info(
        "application_created",
        app_name=settings.app_name,
        version=settings.app_version,
        api_prefix=settings.api_prefix,
        docs_enabled=settings.docs_enabled,
    )
    return app


app = create_app()


def run() -> None:
    """Console entrypoint: serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "profile_api:app",
        host=settings.host,
        port=settings.port,
        access_log=False,
        log_config=None,
    )
