"""
Test fixtures for the ThermoGuard client.

Two kinds of fake API:

- fake_api: a small FastAPI app that mimics the real .NET backend
  (Sensor / Leitura CRUD, temperaturas-altas, por-periodo) with an
  in-memory store. Mounted through httpx.ASGITransport, so the client
  code runs unchanged.
- make_api: builds an ApiService on an httpx.MockTransport handler, for
  exact control over status codes, bodies and delays.
"""

from datetime import datetime

import httpx
import pytest
from fastapi import Body, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from thermoguard.main import build_services
from thermoguard.services import ApiService


BASE_URL = "http://thermoguard.test/api/"


def _parse_iso(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def create_fake_api() -> FastAPI:
    """
    In-memory stand-in for the ThermoGuard backend.

    Every handled request is appended to app.state.requests as
    {"method", "path", "query", "headers", "body"}.
    """
    app = FastAPI()
    app.state.sensores = {}
    app.state.leituras = {}
    app.state.requests = []
    app.state.next_id = {"Sensor": 1, "Leitura": 1}

    def record(request: Request, body=None):
        app.state.requests.append({
            "method": request.method,
            "path": request.url.path,
            "query": dict(request.query_params),
            "headers": dict(request.headers),
            "body": body,
        })

    def not_found():
        return JSONResponse(status_code=404, content={"title": "Not Found", "status": 404})

    def new_id(resource: str) -> int:
        value = app.state.next_id[resource]
        app.state.next_id[resource] += 1
        return value

    # -------------------------------------------------------------------------
    # Sensor
    # -------------------------------------------------------------------------

    @app.get("/api/Sensor")
    async def list_sensores(request: Request):
        record(request)
        return list(app.state.sensores.values())

    @app.get("/api/Sensor/{sensor_id}")
    async def get_sensor(sensor_id: int, request: Request):
        record(request)
        if sensor_id not in app.state.sensores:
            return not_found()
        return app.state.sensores[sensor_id]

    @app.post("/api/Sensor", status_code=201)
    async def create_sensor(request: Request, payload: dict = Body(...)):
        record(request, payload)
        sensor = {"id": new_id("Sensor"), **payload}
        app.state.sensores[sensor["id"]] = sensor
        return sensor

    @app.put("/api/Sensor/{sensor_id}")
    async def update_sensor(sensor_id: int, request: Request, payload: dict = Body(...)):
        record(request, payload)
        if sensor_id not in app.state.sensores:
            return not_found()
        app.state.sensores[sensor_id] = {"id": sensor_id, **payload}
        return Response(status_code=204)

    @app.delete("/api/Sensor/{sensor_id}")
    async def delete_sensor(sensor_id: int, request: Request):
        record(request)
        if app.state.sensores.pop(sensor_id, None) is None:
            return not_found()
        return Response(status_code=204)

    # -------------------------------------------------------------------------
    # Leitura (fixed sub-paths first, before /{leitura_id})
    # -------------------------------------------------------------------------

    @app.get("/api/Leitura/temperaturas-altas")
    async def temperaturas_altas(request: Request):
        record(request)
        return [l for l in app.state.leituras.values() if l["temperatura"] > 40]

    @app.get("/api/Leitura/por-periodo")
    async def por_periodo(inicio: str, fim: str, request: Request):
        record(request)
        start, end = _parse_iso(inicio), _parse_iso(fim)
        return [
            l for l in app.state.leituras.values()
            if start <= _parse_iso(l["dataHora"]) <= end
        ]

    @app.get("/api/Leitura")
    async def list_leituras(request: Request):
        record(request)
        return list(app.state.leituras.values())

    @app.get("/api/Leitura/{leitura_id}")
    async def get_leitura(leitura_id: int, request: Request):
        record(request)
        if leitura_id not in app.state.leituras:
            return not_found()
        return app.state.leituras[leitura_id]

    @app.post("/api/Leitura", status_code=201)
    async def create_leitura(request: Request, payload: dict = Body(...)):
        record(request, payload)
        sensor = app.state.sensores.get(payload.get("sensorId"))
        if sensor is None:
            return JSONResponse(
                status_code=400,
                content={"errors": {"SensorId": ["Sensor não encontrado."]}},
            )
        leitura = {"id": new_id("Leitura"), **payload, "nomeSensor": sensor["nome"]}
        app.state.leituras[leitura["id"]] = leitura
        return leitura

    @app.put("/api/Leitura/{leitura_id}")
    async def update_leitura(leitura_id: int, request: Request, payload: dict = Body(...)):
        record(request, payload)
        if leitura_id not in app.state.leituras:
            return not_found()
        current = app.state.leituras[leitura_id]
        app.state.leituras[leitura_id] = {**current, **payload}
        return Response(status_code=204)

    @app.delete("/api/Leitura/{leitura_id}")
    async def delete_leitura(leitura_id: int, request: Request):
        record(request)
        if app.state.leituras.pop(leitura_id, None) is None:
            return not_found()
        return Response(status_code=204)

    return app


def seed_sensor(app: FastAPI, nome: str = "Câmara Fria 01", localizacao: str = "Galpão B") -> dict:
    sensor_id = app.state.next_id["Sensor"]
    app.state.next_id["Sensor"] += 1
    sensor = {"id": sensor_id, "nome": nome, "localizacao": localizacao}
    app.state.sensores[sensor_id] = sensor
    return sensor


def seed_leitura(app: FastAPI, data_hora: str, temperatura: float, sensor_id: int = 1) -> dict:
    leitura_id = app.state.next_id["Leitura"]
    app.state.next_id["Leitura"] += 1
    sensor = app.state.sensores.get(sensor_id, {})
    leitura = {
        "id": leitura_id,
        "dataHora": data_hora,
        "temperatura": temperatura,
        "sensorId": sensor_id,
        "nomeSensor": sensor.get("nome"),
    }
    app.state.leituras[leitura_id] = leitura
    return leitura


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def fake_api() -> FastAPI:
    """Fresh fake backend per test."""
    return create_fake_api()


@pytest.fixture
async def services(fake_api):
    """All services wired to the fake backend."""
    client = httpx.AsyncClient(transport=httpx.ASGITransport(app=fake_api))
    services = build_services(base_url=BASE_URL, timeout_ms=5000, http_client=client)
    yield services
    await services.close()


@pytest.fixture
async def make_api():
    """
    Factory for an ApiService whose requests go to `handler`.

    Usage:
        api = make_api(lambda request: httpx.Response(200, json=[]))
    """
    created = []

    def factory(handler, timeout_ms: int = 5000) -> ApiService:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        api = ApiService(base_url=BASE_URL, timeout_ms=timeout_ms, http_client=client)
        created.append(api)
        return api

    yield factory

    for api in created:
        await api.close()
