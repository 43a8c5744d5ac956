"""Core infrastructure: exceptions, logging and settings."""

from .exceptions import (
    InvalidParameterError,
    NonConvergentSimulationError,
    ProjectionEngineError,
    SimulationError,
)
from .settings import EngineSettings, get_settings

__all__ = [
    "EngineSettings",
    "get_settings",
    # Exceptions
    "ProjectionEngineError",
    "InvalidParameterError",
    "SimulationError",
    "NonConvergentSimulationError",
]
