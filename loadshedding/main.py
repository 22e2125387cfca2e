from __future__ import annotations

import logging

from fastapi import FastAPI

from loadshedding.api.routes import router as api_router
from loadshedding.config import Settings, load_settings
from loadshedding.core.constants import SAST
from loadshedding.observability.metrics import Metrics
from loadshedding.parsers.base import Normalizer
from loadshedding.parsers.normalizer import ScheduleNormalizer


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def create_app(settings: Settings | None = None, normalizer: Normalizer | None = None) -> FastAPI:
    app_settings = settings or load_settings()
    configure_logging(app_settings.log_level)

    app = FastAPI(title="loadshedding-normalizer", version="0.1.0")
    app.state.settings = app_settings
    app.state.normalizer = normalizer or ScheduleNormalizer(SAST)
    app.state.metrics = Metrics()

    app.include_router(api_router)
    return app


app = create_app()
