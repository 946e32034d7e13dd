from __future__ import annotations

from statusboard.core.config import settings
from statusboard.services.datasets import DatasetService


def get_dataset_service() -> DatasetService:
    return DatasetService(
        settings.status_path,
        settings.issues_path,
        sample_policy=settings.sample_policy,
    )
