"""
Sensor & Leitura Models
=======================
Pydantic models for the two resources the API manages.

These are the DOMAIN shapes the rest of the code works with. The wire
shapes (what the .NET API sends and receives) use camelCase names and
keep timestamps as ISO-8601 strings; the aliases below map between the
two, and the resource services own the conversion.

RESOURCES:
1. Sensor  - a named, located temperature probe
2. Leitura - one timestamped temperature reading tied to a Sensor

Wire examples:
    GET /api/Sensor/1
    {"id": 1, "nome": "Câmara Fria 01", "localizacao": "Galpão B"}

    GET /api/Leitura/7
    {
        "id": 7,
        "dataHora": "2024-05-01T10:00:00Z",
        "temperatura": 4.5,
        "sensorId": 1,
        "nomeSensor": "Câmara Fria 01"
    }
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# SENSOR
# =============================================================================

class Sensor(BaseModel):
    """
    A registered temperature sensor.

    Fields:
        id: Server-assigned identifier, never changes
        nome: Display name (3-100 chars once trimmed)
        localizacao: Where it is installed (3-200 chars once trimmed)
    """
    id: int = Field(..., gt=0, description="Server-assigned identifier")
    nome: str = Field(..., description="Sensor name")
    localizacao: str = Field(..., description="Physical location")


# =============================================================================
# LEITURA (READING)
# =============================================================================

class Leitura(BaseModel):
    """
    One temperature reading.

    data_hora is always timezone-aware. nome_sensor is filled in by the
    server on reads and ignored on writes.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., gt=0, description="Server-assigned identifier")
    data_hora: datetime = Field(..., alias="dataHora", description="When it was measured")
    temperatura: float = Field(..., description="Temperature in °C")
    sensor_id: int = Field(..., gt=0, alias="sensorId", description="Owning sensor")
    nome_sensor: Optional[str] = Field(None, alias="nomeSensor", description="Sensor name (read-only)")
