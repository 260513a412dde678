"""
Services Package
================

These are the "workers" that do the actual work.

- ApiService: Talks HTTP to the ThermoGuard backend
- SensorService: CRUD for sensors
- LeituraService: CRUD for readings + high temperatures + period queries
- DashboardService: Home screen stats and period reports
"""

from .api_service import ApiService
from .resource_service import ResourceService
from .sensor_service import SensorService
from .leitura_service import LeituraService
from .dashboard_service import DashboardService

__all__ = [
    "ApiService",
    "ResourceService",
    "SensorService",
    "LeituraService",
    "DashboardService",
]
