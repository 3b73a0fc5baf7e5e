# woke_or_not/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .catalog import catalog_router
from .catalog.store import load_catalog
from .config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL)
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger().setLevel(settings.LOG_LEVEL)

    app = FastAPI(
        title="Woke or Not",
        description=(
            "Read-only catalogue of companies, countries, non-profits, media, "
            "educational institutions and government bodies, each rated "
            "woke or not woke with a percentage score."
        ),
        version="1.0.0",
    )

    # The catalogue is built once and shared read-only by every request.
    app.state.settings = settings
    app.state.catalog = load_catalog(settings.DATA_FILE)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(catalog_router)

    # Base route for a quick liveness check
    @app.get("/")
    def health_check(request: Request):
        return {"status": "ok", "entities": len(request.app.state.catalog)}

    logger.info("Catalogue API ready with %d entities", len(app.state.catalog))
    return app


app = create_app()
