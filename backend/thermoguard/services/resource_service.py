"""
Resource Service
================

The shared CRUD pipeline behind SensorService and LeituraService.

    create(payload)
        |
        | 1. validate  -> ValidationFailed (nothing sent)
        | 2. to_dto    -> trimmed strings, real numbers, ISO dates
        v
    ApiService.post(endpoint, dto)
        |
        | 3. from_dto  -> Sensor / Leitura (or DomainError)
        v
    caller

Subclasses only say WHICH endpoint, HOW to validate, and HOW to map
between wire dicts and domain models.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, List, TypeVar

from pydantic import BaseModel

from thermoguard.config import resource_endpoint
from thermoguard.exceptions import MalformedResponse, ValidationFailed
from thermoguard.models import ValidationResult
from thermoguard.services.api_service import ApiService

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResourceService(ABC, Generic[ModelT]):
    """
    list / get_by_id / create / update / delete for one API resource.

    Subclasses must set `endpoint` and implement validate(), to_dto()
    and from_dto().
    """

    endpoint: str = ""

    def __init__(self, api_service: ApiService):
        self.api = api_service

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------

    @abstractmethod
    def validate(self, payload: Any) -> ValidationResult:
        pass

    @abstractmethod
    def to_dto(self, payload: Any) -> dict:
        pass

    @abstractmethod
    def from_dto(self, data: Any) -> ModelT:
        pass

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def list(self) -> List[ModelT]:
        data = await self.api.get(self.endpoint)
        return self.from_dto_list(data, self.endpoint)

    async def get_by_id(self, resource_id: int) -> ModelT:
        data = await self.api.get(resource_endpoint(self.endpoint, resource_id))
        return self.from_dto(data)

    async def create(self, payload: Any) -> ModelT:
        dto = self.prepare(payload, self.endpoint)
        data = await self.api.post(self.endpoint, dto)
        created = self.from_dto(data)
        logger.info(f"Created {self.endpoint} {created.id}")
        return created

    async def update(self, resource_id: int, payload: Any) -> bool:
        endpoint = resource_endpoint(self.endpoint, resource_id)
        dto = self.prepare(payload, endpoint)
        await self.api.put(endpoint, dto)
        logger.info(f"Updated {endpoint}")
        return True

    async def delete(self, resource_id: int) -> bool:
        endpoint = resource_endpoint(self.endpoint, resource_id)
        await self.api.delete(endpoint)
        logger.info(f"Deleted {endpoint}")
        return True

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def prepare(self, payload: Any, endpoint: str) -> dict:
        """Validate a payload and map it to its wire DTO."""
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(by_alias=True)

        validation = self.validate(payload)
        if not validation.is_valid:
            logger.warning(f"Rejected payload for {endpoint}: {validation.errors}")
            raise ValidationFailed(validation.errors, endpoint)
        return self.to_dto(payload)

    def from_dto_list(self, data: Any, endpoint: str) -> List[ModelT]:
        if not isinstance(data, list):
            raise MalformedResponse(
                f"Esperava uma lista de {endpoint}, recebeu {type(data).__name__}",
                endpoint,
            )
        return [self.from_dto(item) for item in data]
