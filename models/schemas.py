"""Pydantic models for thresholds and console alerts."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from models.errors import ConfigurationError


class Severity(str, Enum):
    """Severity attached to every message written to an alert sink."""

    info = "info"
    warning = "warning"
    emergency = "emergency"


class Thresholds(BaseModel):
    """Warning and emergency levels, fixed for the lifetime of a device."""

    model_config = ConfigDict(frozen=True)

    warning: float = Field(..., description="Readings at or above this level are elevated.")
    emergency: float = Field(..., description="Readings strictly above this level are critical.")

    @model_validator(mode="after")
    def _check_ordering(self) -> "Thresholds":
        if self.warning >= self.emergency:
            raise ValueError(
                f"warning level {self.warning} must be below emergency level {self.emergency}"
            )
        return self


class AlertMessage(BaseModel):
    """A message handed to an alert sink; the sink decides how to present it."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    text: str
    value: Optional[float] = None
    timestamp: Optional[datetime] = None


def build_thresholds(warning: float, emergency: float) -> Thresholds:
    try:
        return Thresholds(warning=warning, emergency=emergency)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid thresholds (warning={warning}, emergency={emergency})"
        ) from exc
