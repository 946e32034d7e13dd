from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo

from statusboard.api.schemas.issues import Issue
from statusboard.api.schemas.status import ServiceSeries, StatusDataset
from statusboard.services.chart import RenderedChart, render
from statusboard.services.classifier import ServiceStatus
from statusboard.services.issues import IssueAlert, split_issues
from statusboard.services.time_labels import DISCLAIMER, time_labels

BADGE_STYLES = {
    ServiceStatus.UP: "badge-up",
    ServiceStatus.DEGRADED: "badge-degraded",
    ServiceStatus.DOWN: "badge-down",
}


@dataclass(frozen=True)
class ServicePanel:
    name: str
    title: str
    chart: RenderedChart
    time_labels: list[str]

    @property
    def slug(self) -> str:
        """HTML-id-safe form of the service name: "API Gateway" -> "api-gateway"."""
        return re.sub(r"[^a-z0-9]+", "-", self.name.lower()).strip("-")

    @property
    def status(self) -> ServiceStatus:
        return self.chart.status

    @property
    def badge_label(self) -> str:
        return self.status.value

    @property
    def badge_style(self) -> str:
        return BADGE_STYLES[self.status]


@dataclass(frozen=True)
class Dashboard:
    title: str
    top_issues: list[IssueAlert]
    panels: list[ServicePanel]
    bottom_issues: list[IssueAlert]
    disclaimer: str = DISCLAIMER


def display_title(name: str) -> str:
    # Only the first letter changes; "api gateway" -> "Api gateway".
    return name[:1].upper() + name[1:]


def build_panel(
    series: ServiceSeries,
    *,
    now: datetime,
    interval_min: int,
    tz: tzinfo | None = None,
) -> ServicePanel:
    return ServicePanel(
        name=series.name,
        title=display_title(series.name),
        chart=render(series.samples),
        time_labels=time_labels(len(series.samples), now=now, interval_min=interval_min, tz=tz),
    )


def compose(
    status: StatusDataset,
    issues: list[Issue],
    *,
    title: str,
    now: datetime | None = None,
    interval_min: int = 30,
    tz: tzinfo | None = None,
) -> Dashboard:
    """Everything the dashboard template needs, derived fresh from the datasets."""
    if now is None:
        now = datetime.now(timezone.utc)
    sections = split_issues(issues)
    panels = [build_panel(series, now=now, interval_min=interval_min, tz=tz) for series in status.services]
    return Dashboard(
        title=title,
        top_issues=sections.top,
        panels=panels,
        bottom_issues=sections.bottom,
    )
