"""Exceptions raised by the thermal simulation."""

from __future__ import annotations


class ThermalSimulationError(Exception):
    """Base class for simulation failures."""


class ConfigurationError(ThermalSimulationError):
    """Threshold levels are inconsistent (warning must be below emergency)."""


class EmptySequenceError(ThermalSimulationError):
    """A sensor was given no readings to play back."""
