"""Tests for SensorService against the fake backend."""

from unittest.mock import AsyncMock

import httpx
import pytest

from conftest import seed_sensor
from thermoguard.exceptions import DomainError, HttpError, MalformedResponse, ValidationFailed
from thermoguard.models import Sensor
from thermoguard.services import ApiService, ResourceService, SensorService
from thermoguard.utils.validation import validate_sensor_data


@pytest.mark.asyncio
async def test_list_returns_sensor_models(services, fake_api):
    seed_sensor(fake_api, "Câmara Fria 01", "Galpão B")
    seed_sensor(fake_api, "Estufa", "Bloco C")

    sensores = await services.sensores.list()

    assert [s.nome for s in sensores] == ["Câmara Fria 01", "Estufa"]
    assert all(isinstance(s, Sensor) for s in sensores)
    assert sensores[0].id == 1


@pytest.mark.asyncio
async def test_get_by_id(services, fake_api):
    seed_sensor(fake_api)
    sensor = await services.sensores.get_by_id(1)
    assert sensor.localizacao == "Galpão B"
    assert fake_api.state.requests[-1]["path"] == "/api/Sensor/1"


@pytest.mark.asyncio
async def test_get_missing_sensor_raises_http_error(services):
    with pytest.raises(HttpError) as exc_info:
        await services.sensores.get_by_id(99)
    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == "Not Found"


@pytest.mark.asyncio
async def test_create_trims_and_returns_created_sensor(services, fake_api):
    sensor = await services.sensores.create({"nome": "  Câmara 1  ", "localizacao": " Galpão B "})

    assert sensor == Sensor(id=1, nome="Câmara 1", localizacao="Galpão B")
    sent = fake_api.state.requests[-1]
    assert sent["method"] == "POST"
    assert sent["body"] == {"nome": "Câmara 1", "localizacao": "Galpão B"}
    assert sent["headers"]["content-type"] == "application/json"
    assert sent["headers"]["accept"] == "application/json"


@pytest.mark.asyncio
async def test_create_invalid_sends_nothing(services, fake_api):
    with pytest.raises(ValidationFailed) as exc_info:
        await services.sensores.create({"nome": "ab", "localizacao": ""})

    assert exc_info.value.errors == {
        "nome": "O nome deve ter pelo menos 3 caracteres.",
        "localizacao": "A localização é obrigatória.",
    }
    assert str(exc_info.value).startswith("Dados inválidos: ")
    assert fake_api.state.requests == []


@pytest.mark.asyncio
async def test_update_replaces_fields(services, fake_api):
    seed_sensor(fake_api, "Antigo", "Lugar antigo")

    assert await services.sensores.update(1, {"nome": " Novo nome ", "localizacao": "Lugar novo"}) is True

    assert fake_api.state.sensores[1] == {"id": 1, "nome": "Novo nome", "localizacao": "Lugar novo"}
    assert fake_api.state.requests[-1]["method"] == "PUT"


@pytest.mark.asyncio
async def test_update_accepts_a_sensor_model(services, fake_api):
    seed_sensor(fake_api)
    sensor = await services.sensores.get_by_id(1)
    updated = sensor.model_copy(update={"nome": "Renomeado"})

    await services.sensores.update(sensor.id, updated)

    assert fake_api.state.requests[-1]["body"] == {"nome": "Renomeado", "localizacao": "Galpão B"}


@pytest.mark.asyncio
async def test_update_invalid_never_calls_put():
    api = AsyncMock(spec=ApiService)
    service = SensorService(api)

    with pytest.raises(ValidationFailed):
        await service.update(1, {"nome": "", "localizacao": "Galpão"})

    api.put.assert_not_called()


@pytest.mark.asyncio
async def test_delete(services, fake_api):
    seed_sensor(fake_api)
    assert await services.sensores.delete(1) is True
    assert fake_api.state.sensores == {}

    with pytest.raises(HttpError):
        await services.sensores.delete(1)


@pytest.mark.asyncio
async def test_list_rejects_non_list_body(make_api):
    api = make_api(lambda request: httpx.Response(200, json={"sensores": []}))
    with pytest.raises(MalformedResponse):
        await SensorService(api).list()


@pytest.mark.asyncio
async def test_bad_sensor_data_is_domain_error(make_api):
    api = make_api(lambda request: httpx.Response(200, json=[{"id": 1, "nome": "Sem local"}]))
    with pytest.raises(DomainError):
        await SensorService(api).list()


def test_resource_service_requires_every_hook():
    class NoMapping(ResourceService):
        endpoint = "Sensor"

        def validate(self, payload):
            return validate_sensor_data(payload)

    with pytest.raises(TypeError):
        NoMapping(AsyncMock(spec=ApiService))
