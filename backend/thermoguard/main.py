"""
ThermoGuard Client - Service Wiring
===================================

Builds the service objects ONCE at start-up and hands them out by
reference. There are no module-level singletons: whoever needs a
service gets it from here (or builds its own, e.g. in tests).

HOW TO USE:
    from thermoguard.main import lifespan

    async with lifespan() as services:
        sensores = await services.sensores.list()
        stats = await services.dashboard.load_stats()

    # The HTTP client is closed when the block exits

Author: ThermoGuard Team
"""

import logging
import sys
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Optional

import httpx

from thermoguard.config import Config
from thermoguard.services import ApiService, DashboardService, LeituraService, SensorService

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None):
    """
    Send log output to stderr as "[HH:MM:SS] message".

    Args:
        level: Log level name (default: Config.LOG_LEVEL)
    """
    logging.basicConfig(
        level=(level or Config.LOG_LEVEL).upper(),
        format="[%(asctime)s] %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


@dataclass
class ThermoGuardServices:
    """Every service the app uses, sharing one ApiService."""
    api: ApiService
    sensores: SensorService
    leituras: LeituraService
    dashboard: DashboardService

    async def close(self):
        await self.api.close()


def build_services(
    base_url: Optional[str] = None,
    timeout_ms: Optional[int] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> ThermoGuardServices:
    """
    Create the services, wired together.

    Args:
        base_url: API root (default: Config.API_BASE_URL)
        timeout_ms: Per-request deadline (default: Config.REQUEST_TIMEOUT_MS)
        http_client: Optional pre-built client (tests pass a fake transport)
    """
    api = ApiService(base_url=base_url, timeout_ms=timeout_ms, http_client=http_client)
    sensores = SensorService(api)
    leituras = LeituraService(api)
    return ThermoGuardServices(
        api=api,
        sensores=sensores,
        leituras=leituras,
        dashboard=DashboardService(sensores, leituras),
    )


@asynccontextmanager
async def lifespan(**kwargs):
    """
    Application lifespan handler.

    STARTUP:
        1. Build services
        2. Log where we're pointing

    SHUTDOWN:
        1. Close the HTTP client
    """
    services = build_services(**kwargs)
    logger.info(f"ThermoGuard client ready - API: {services.api.base_url}")
    try:
        yield services
    finally:
        await services.close()
        logger.info("ThermoGuard client closed")
