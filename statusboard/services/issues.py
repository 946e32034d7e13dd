from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from statusboard.api.schemas.issues import Issue, Severity

ALERT_STYLES = {
    Severity.WARNING: "alert-warning",
    Severity.ERROR: "alert-error",
    Severity.INFO: "alert-info",
}

ALERT_ICONS = {
    Severity.WARNING: "⚠️",
    Severity.ERROR: "❌",
    Severity.INFO: "ℹ️",
}


@dataclass(frozen=True)
class IssueAlert:
    key: str
    message: str
    severity: Severity
    icon: str
    style: str


@dataclass(frozen=True)
class IssueSections:
    top: list[IssueAlert]
    bottom: list[IssueAlert]


def to_alert(issue: Issue, index: int) -> IssueAlert:
    return IssueAlert(
        key=str(issue.id if issue.id is not None else index),
        message=issue.message,
        severity=issue.type,
        icon=ALERT_ICONS[issue.type],
        style=ALERT_STYLES[issue.type],
    )


def split_issues(issues: Sequence[Issue]) -> IssueSections:
    """General notices go above the service grid, outage notices below it."""
    top: list[IssueAlert] = []
    bottom: list[IssueAlert] = []
    for index, issue in enumerate(issues):
        (bottom if issue.down else top).append(to_alert(issue, index))
    return IssueSections(top=top, bottom=bottom)
