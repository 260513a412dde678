"""
Models Package
==============

This is where all our data models live.
Import from here instead of the individual files.

Example:
    from thermoguard.models import Sensor, Leitura, ValidationResult
"""

from .sensor import (
    # The two resources the API manages
    Sensor,
    Leitura,
)
from .temperature import (
    # Temperature banding
    ListBand,
    ClassifierBand,
    TemperatureBand,
)
from .errors import (
    # Shapes of a non-2xx response body
    MessageEnvelope,
    TitleEnvelope,
    ErrorsEnvelope,
    UnrecognizedEnvelope,
    ErrorEnvelope,
    parse_error_envelope,
)
from .results import (
    # What we hand back to callers
    ValidationResult,
    DashboardStats,
    PeriodStats,
    PeriodReport,
)

__all__ = [
    "Sensor",
    "Leitura",
    "ListBand",
    "ClassifierBand",
    "TemperatureBand",
    "MessageEnvelope",
    "TitleEnvelope",
    "ErrorsEnvelope",
    "UnrecognizedEnvelope",
    "ErrorEnvelope",
    "parse_error_envelope",
    "ValidationResult",
    "DashboardStats",
    "PeriodStats",
    "PeriodReport",
]
