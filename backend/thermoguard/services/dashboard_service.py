"""
Dashboard Service
=================

The numbers behind the home screen and the period report.

HOME SCREEN:
-----------
Three independent reads run at the same time and are joined:

    sensores ----\
    leituras -----+--> DashboardStats
    altas -------/

If any of them fails, the whole thing fails. No partial stats.

PERIOD REPORT:
-------------
Checks that inicio <= fim BEFORE asking the API, then computes
min / max / average over what comes back.

Author: ThermoGuard Team
"""

import asyncio
import logging
import math
from datetime import datetime
from typing import Iterable, List

from thermoguard.exceptions import ValidationFailed
from thermoguard.models import DashboardStats, Leitura, PeriodReport, PeriodStats
from thermoguard.services.leitura_service import LeituraService
from thermoguard.services.sensor_service import SensorService
from thermoguard.utils.validation import validate_period

logger = logging.getLogger(__name__)


def round_one_decimal(value: float) -> float:
    """Round to 1 decimal, halves going up (22.25 -> 22.3, -1.25 -> -1.2)."""
    return math.floor(value * 10 + 0.5) / 10


def newest_first(leituras: Iterable[Leitura]) -> List[Leitura]:
    return sorted(leituras, key=lambda leitura: leitura.data_hora, reverse=True)


class DashboardService:
    """
    Aggregates sensor and reading data for display.

    Takes the resource services it reads from, so tests can hand it fakes.
    """

    def __init__(self, sensor_service: SensorService, leitura_service: LeituraService):
        self.sensor_service = sensor_service
        self.leitura_service = leitura_service

    async def load_stats(self) -> DashboardStats:
        """
        Load everything the home screen shows.

        Returns:
            DashboardStats with totals, average and latest reading
        """
        sensores, leituras, altas = await asyncio.gather(
            self.sensor_service.list(),
            self.leitura_service.list(),
            self.leitura_service.get_high_temperatures(),
        )

        media = 0.0
        if leituras:
            media = round_one_decimal(sum(l.temperatura for l in leituras) / len(leituras))

        ultima = newest_first(leituras)[0] if leituras else None

        logger.debug(
            f"Dashboard: {len(sensores)} sensores, {len(leituras)} leituras, {len(altas)} altas"
        )
        return DashboardStats(
            total_sensores=len(sensores),
            total_leituras=len(leituras),
            temperaturas_altas=len(altas),
            temperatura_media=media,
            ultima_leitura=ultima,
        )

    async def generate_period_report(self, inicio: datetime, fim: datetime) -> PeriodReport:
        """
        Build the report for a period.

        Args:
            inicio: Start of the period
            fim: End of the period

        Returns:
            PeriodReport; stats is None when the period has no readings

        Raises:
            ValidationFailed: If inicio is after fim (nothing is requested)
        """
        validation = validate_period(inicio, fim)
        if not validation.is_valid:
            raise ValidationFailed(validation.errors)

        leituras = await self.leitura_service.get_by_period(inicio, fim)

        stats = None
        if leituras:
            temperaturas = [leitura.temperatura for leitura in leituras]
            stats = PeriodStats(
                min_temp=round_one_decimal(min(temperaturas)),
                max_temp=round_one_decimal(max(temperaturas)),
                avg_temp=round_one_decimal(sum(temperaturas) / len(temperaturas)),
                total_leituras=len(leituras),
            )

        return PeriodReport(inicio=inicio, fim=fim, leituras=leituras, stats=stats)
