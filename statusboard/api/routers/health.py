from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from statusboard.api.dependencies import get_dataset_service
from statusboard.services.datasets import DatasetError, DatasetService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(datasets: DatasetService = Depends(get_dataset_service)) -> dict:
    try:
        datasets.load_status()
        datasets.load_issues()
    except DatasetError as exc:
        logger.error("health check failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Datasets unavailable")
    return {"status": "ok"}
