"""FastAPI application entrypoint."""

from fastapi import FastAPI

from app.api.errors import register_exception_handlers
from app.api.router import api_router
from app.config import get_settings
from app.core.logging import setup_logging


def create_app() -> FastAPI:
    """Build the API application from current settings."""

    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, debug=settings.debug)
    app.include_router(api_router, prefix=settings.api_prefix)
    register_exception_handlers(app)

    @app.get("/health", tags=["system"])
    async def health() -> dict[str, str]:
        """Simple liveness endpoint for uptime checks."""

        return {"status": "ok"}

    return app


app = create_app()
