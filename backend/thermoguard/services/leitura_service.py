"""
Leitura Service
===============

CRUD for temperature readings, plus the two report queries.

DATES:
-----
On the wire, dataHora is an ISO-8601 string. Everywhere else it is a
timezone-aware datetime. This service is the only thing that converts
between the two:

    outgoing: datetime / "2024-05-01T10:00"  ->  "2024-05-01T10:00:00.000Z"
    incoming: "2024-05-01T10:00:00Z"         ->  datetime(2024, 5, 1, 10, tzinfo=UTC)

A reading whose dataHora can't be parsed raises DomainError. We never
fill in "now" or any other default.

Author: ThermoGuard Team
"""

import logging
from datetime import datetime
from typing import Any, List

from pydantic import ValidationError

from thermoguard.config import LEITURA_ENDPOINT, POR_PERIODO_ENDPOINT, TEMPERATURAS_ALTAS_ENDPOINT
from thermoguard.exceptions import DomainError, InvalidTimestamp
from thermoguard.models import Leitura, ValidationResult
from thermoguard.services.resource_service import ResourceService
from thermoguard.utils.validation import (
    format_data_hora,
    parse_data_hora,
    parse_sensor_id,
    parse_temperatura,
    validate_leitura_data,
)

logger = logging.getLogger(__name__)


class LeituraService(ResourceService[Leitura]):
    """
    Resource service for /Leitura.

    HOW TO USE:
    ----------
    service = LeituraService(api_service)

    nova = await service.create({
        "dataHora": datetime.now(timezone.utc),
        "temperatura": "4,5",      # form text is fine
        "sensorId": "1",
    })

    altas = await service.get_high_temperatures()
    semana = await service.get_by_period(inicio, fim)
    """

    endpoint = LEITURA_ENDPOINT

    def validate(self, payload: Any) -> ValidationResult:
        return validate_leitura_data(payload)

    def to_dto(self, payload: Any) -> dict:
        return {
            "dataHora": format_data_hora(parse_data_hora(payload["dataHora"])),
            "temperatura": parse_temperatura(payload["temperatura"]),
            "sensorId": parse_sensor_id(payload["sensorId"]),
        }

    def from_dto(self, data: Any) -> Leitura:
        if not isinstance(data, dict):
            raise DomainError(f"Leitura inválida recebida da API: {data!r}", self.endpoint)

        try:
            data_hora = parse_data_hora(data.get("dataHora"))
        except InvalidTimestamp as e:
            logger.error(f"Bad dataHora from API: {data.get('dataHora')!r}")
            raise DomainError(
                f"Data e hora inválidas na leitura {data.get('id')}: {data.get('dataHora')!r}",
                self.endpoint,
            ) from e

        try:
            return Leitura.model_validate({**data, "dataHora": data_hora})
        except ValidationError as e:
            logger.error(f"Bad reading data from API: {data!r}")
            raise DomainError(f"Leitura inválida recebida da API: {e}", self.endpoint) from e

    async def get_high_temperatures(self) -> List[Leitura]:
        """
        Readings the API considers high.

        The filtering happens on the server; no threshold is applied here.
        """
        data = await self.api.get(TEMPERATURAS_ALTAS_ENDPOINT)
        return self.from_dto_list(data, TEMPERATURAS_ALTAS_ENDPOINT)

    async def get_by_period(self, inicio: datetime, fim: datetime) -> List[Leitura]:
        """
        Readings between inicio and fim.

        The order of the two dates is NOT checked here. An inverted range
        goes to the server exactly as given, so check inicio <= fim first
        (see validate_period / DashboardService.generate_period_report).

        Args:
            inicio: Start of the period
            fim: End of the period

        Returns:
            The readings in the period, as the server filtered them
        """
        params = {
            "inicio": format_data_hora(parse_data_hora(inicio)),
            "fim": format_data_hora(parse_data_hora(fim)),
        }
        data = await self.api.get(POR_PERIODO_ENDPOINT, params)
        return self.from_dto_list(data, POR_PERIODO_ENDPOINT)
