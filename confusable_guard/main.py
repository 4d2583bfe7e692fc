# confusable_guard/main.py
from __future__ import annotations

import logging

from fastapi import FastAPI

from confusable_guard.config import APP_VERSION, get_settings
from confusable_guard.routes import router
from confusable_guard.tables import default_engine
from confusable_guard.telemetry.logging import configure_root_logging

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    configure_root_logging(settings.LOG_LEVEL, json_lines=settings.LOG_JSON)

    app = FastAPI(title="confusable-guard", version=APP_VERSION)
    app.include_router(router)

    # parse the baseline table up front rather than on the first request
    engine = default_engine()
    log.info("confusables service ready", extra={"mappings": len(engine.store)})
    return app


app = create_app()
