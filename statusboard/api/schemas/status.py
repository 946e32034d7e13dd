from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictFloat


class ServiceSeries(BaseModel):
    """Uptime samples for one service, oldest first; the last one is current."""

    name: str = Field(..., min_length=1)
    samples: list[StrictFloat] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    @property
    def current(self) -> float:
        return self.samples[-1]


class StatusDataset(BaseModel):
    services: list[ServiceSeries] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
