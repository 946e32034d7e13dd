from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request, status
from starlette.responses import HTMLResponse
from starlette.templating import Jinja2Templates

from statusboard.api.dependencies import get_dataset_service
from statusboard.core.config import settings
from statusboard.services import chart
from statusboard.services.datasets import DatasetError, DatasetService
from statusboard.services.page import compose

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "web" / "templates"

router = APIRouter(tags=["ui"])
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.get("/", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    datasets: DatasetService = Depends(get_dataset_service),
) -> HTMLResponse:
    try:
        status_data = datasets.load_status()
        issues = datasets.load_issues()
    except DatasetError:
        logger.exception("failed to load dashboard datasets")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Status data is invalid")

    page = compose(
        status_data,
        issues,
        title=settings.page_title,
        interval_min=settings.sample_interval_min,
    )
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "page": page,
            "chart": chart,
        },
    )
