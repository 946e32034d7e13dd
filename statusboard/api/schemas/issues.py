from __future__ import annotations

import enum
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)


class Severity(str, enum.Enum):
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


class Issue(BaseModel):
    id: int | None = None
    type: Severity = Severity.INFO
    message: str
    down: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator("type", mode="before")
    @classmethod
    def _unknown_severity_as_info(cls, value: Any) -> Any:
        if isinstance(value, Severity):
            return value
        try:
            return Severity(value)
        except ValueError:
            logger.warning("unknown issue severity %r, rendering as info", value)
            return Severity.INFO

    @field_validator("down", mode="before")
    @classmethod
    def _missing_down_flag(cls, value: Any) -> Any:
        return False if value is None else value
