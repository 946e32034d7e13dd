import json

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from statusboard.services.datasets import DatasetService

STATUS_DATA = {
    "website": [100, 100, 100, 100],
    "api": [100, 100, 50, 0],
    "database": [100, 0, 100, 75],
}

ISSUES_DATA = [
    {"type": "error", "message": "X down", "down": True},
    {"type": "info", "message": "Maintenance", "down": False},
]


@pytest.fixture
def write_datasets(tmp_path):
    """Write status/issues JSON files and return a DatasetService over them."""

    def _write(status=None, issues=None, sample_policy="reject"):
        status_path = tmp_path / "status.json"
        issues_path = tmp_path / "issues.json"
        status_path.write_text(json.dumps(STATUS_DATA if status is None else status), encoding="utf-8")
        issues_path.write_text(json.dumps(ISSUES_DATA if issues is None else issues), encoding="utf-8")
        return DatasetService(status_path, issues_path, sample_policy=sample_policy)

    return _write


@pytest.fixture
def dataset_service(write_datasets):
    return write_datasets()


@pytest.fixture
def app_with_data(dataset_service):
    """FastAPI app wired to the temporary datasets."""
    from statusboard.api.dependencies import get_dataset_service
    from statusboard.api.main import app

    app.dependency_overrides[get_dataset_service] = lambda: dataset_service
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app_with_data):
    transport = ASGITransport(app=app_with_data)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
