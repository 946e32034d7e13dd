from __future__ import annotations

import enum
from typing import Sequence


class ServiceStatus(str, enum.Enum):
    UP = "Up"
    DEGRADED = "Degraded"
    DOWN = "Down"


class EmptySeriesError(ValueError):
    """Raised when a series has no samples, so it has no current status."""


def classify(samples: Sequence[float]) -> ServiceStatus:
    """Status of a service from its most recent sample only.

    Earlier samples are ignored: an outage an hour ago does not affect
    the current status.
    """
    if not samples:
        raise EmptySeriesError("uptime series is empty")
    return classify_sample(samples[-1])


def classify_sample(value: float) -> ServiceStatus:
    if value == 100:
        return ServiceStatus.UP
    if value == 0:
        return ServiceStatus.DOWN
    return ServiceStatus.DEGRADED
