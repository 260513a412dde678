"""
Sensor Service
==============

CRUD for sensors.

    service = SensorService(api_service)

    sensores = await service.list()
    sensor = await service.create({"nome": " Câmara 1 ", "localizacao": "Galpão B"})
    await service.update(sensor.id, {"nome": "Câmara 01", "localizacao": "Galpão B"})
    await service.delete(sensor.id)

Names are trimmed before they are sent.
"""

import logging
from typing import Any

from pydantic import ValidationError

from thermoguard.config import SENSOR_ENDPOINT
from thermoguard.exceptions import DomainError
from thermoguard.models import Sensor, ValidationResult
from thermoguard.services.resource_service import ResourceService
from thermoguard.utils.validation import validate_sensor_data

logger = logging.getLogger(__name__)


class SensorService(ResourceService[Sensor]):
    """Resource service for /Sensor."""

    endpoint = SENSOR_ENDPOINT

    def validate(self, payload: Any) -> ValidationResult:
        return validate_sensor_data(payload)

    def to_dto(self, payload: Any) -> dict:
        return {
            "nome": payload["nome"].strip(),
            "localizacao": payload["localizacao"].strip(),
        }

    def from_dto(self, data: Any) -> Sensor:
        try:
            return Sensor.model_validate(data)
        except ValidationError as e:
            logger.error(f"Bad sensor data from API: {data!r}")
            raise DomainError(f"Sensor inválido recebido da API: {e}", self.endpoint) from e
