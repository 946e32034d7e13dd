from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Literal

from pydantic import TypeAdapter, ValidationError

from statusboard.api.schemas.issues import Issue
from statusboard.api.schemas.status import ServiceSeries, StatusDataset

logger = logging.getLogger(__name__)

SamplePolicy = Literal["reject", "clamp"]

_issues_adapter = TypeAdapter(list[Issue])


class DatasetError(ValueError):
    """A status or issues file is missing, unparsable or holds invalid data."""


class DatasetService:
    """Reads the static ``status.json`` and ``issues.json`` files.

    Nothing is cached: every call re-reads and re-validates the files, so
    an edited dataset shows up on the next page view.
    """

    def __init__(
        self,
        status_path: Path,
        issues_path: Path,
        *,
        sample_policy: SamplePolicy = "reject",
    ) -> None:
        self.status_path = Path(status_path)
        self.issues_path = Path(issues_path)
        self.sample_policy = sample_policy

    def load_status(self) -> StatusDataset:
        dataset = parse_status(_read_json(self.status_path), sample_policy=self.sample_policy)
        logger.info("loaded %d services from %s", len(dataset.services), self.status_path)
        return dataset

    def load_issues(self) -> list[Issue]:
        issues = parse_issues(_read_json(self.issues_path))
        logger.info("loaded %d issues from %s", len(issues), self.issues_path)
        return issues


def _read_json(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as exc:
        raise DatasetError(f"dataset file not found: {path}") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise DatasetError(f"cannot read dataset {path}: {exc}") from exc


def parse_status(raw: Any, *, sample_policy: SamplePolicy = "reject") -> StatusDataset:
    """Build a dataset from a ``{service: [samples...]}`` mapping.

    Services keep the mapping's declaration order. Samples outside
    [0, 100] are rejected or clamped depending on ``sample_policy``.
    """
    if not isinstance(raw, dict):
        raise DatasetError("status data must map service names to sample lists")

    services = []
    for name, samples in raw.items():
        if samples == []:
            raise DatasetError(f"{name}: uptime series is empty")
        try:
            series = ServiceSeries(name=name, samples=samples)
        except ValidationError as exc:
            raise DatasetError(f"invalid series for service {name!r}: {exc}") from exc
        services.append(_check_range(series, sample_policy))
    return StatusDataset(services=services)


def _check_range(series: ServiceSeries, sample_policy: SamplePolicy) -> ServiceSeries:
    samples = []
    for index, value in enumerate(series.samples):
        if not math.isfinite(value):
            raise DatasetError(f"{series.name}: sample {index} is not a finite number")
        if 0 <= value <= 100:
            samples.append(value)
            continue
        if sample_policy == "reject":
            raise DatasetError(f"{series.name}: sample {index} = {value:g} is outside [0, 100]")
        clamped = min(max(value, 0.0), 100.0)
        logger.warning(
            "clamping out-of-range sample %s[%d] = %g to %g", series.name, index, value, clamped
        )
        samples.append(clamped)
    return ServiceSeries(name=series.name, samples=samples)


def parse_issues(raw: Any) -> list[Issue]:
    try:
        return _issues_adapter.validate_python(raw)
    except ValidationError as exc:
        raise DatasetError(f"invalid issues data: {exc}") from exc
