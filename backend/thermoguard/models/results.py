"""
Result Models
=============

Plain results handed back to callers: validation outcomes and the
numbers shown on the dashboard and the period report.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .sensor import Leitura


class ValidationResult(BaseModel):
    """
    Outcome of validating a payload.

    errors maps the wire field name ("nome", "temperatura", ...) to a
    message. A field with no problem has no key.
    """
    is_valid: bool
    errors: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_errors(cls, errors: dict) -> "ValidationResult":
        return cls(is_valid=not errors, errors=errors)


# =============================================================================
# DASHBOARD & REPORTS
# =============================================================================

class DashboardStats(BaseModel):
    """
    Numbers shown on the home screen.

    Fields:
        total_sensores: How many sensors are registered
        total_leituras: How many readings exist
        temperaturas_altas: How many readings the API flags as high
        temperatura_media: Average temperature, 1 decimal (0 with no readings)
        ultima_leitura: Most recent reading, if any
    """
    total_sensores: int
    total_leituras: int
    temperaturas_altas: int
    temperatura_media: float
    ultima_leitura: Optional[Leitura] = None


class PeriodStats(BaseModel):
    """Min/max/average of the readings in a period, 1 decimal each."""
    min_temp: float
    max_temp: float
    avg_temp: float
    total_leituras: int


class PeriodReport(BaseModel):
    """Readings of a period plus their stats (None when the period is empty)."""
    inicio: datetime
    fim: datetime
    leituras: list[Leitura]
    stats: Optional[PeriodStats] = None
