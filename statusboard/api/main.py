from __future__ import annotations

import logging

from fastapi import FastAPI

from statusboard.api.routers import health, ui
from statusboard.core.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(title="Service Status Dashboard", docs_url=None, redoc_url=None, openapi_url=None)

app.include_router(ui.router)
app.include_router(health.router)
