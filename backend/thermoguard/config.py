"""
ThermoGuard Configuration
=========================

Everything the client needs to know about the remote API lives here:
where it is, how long we wait for it, and which paths it exposes.

Values that change between machines (API URL, timeout, log level) come
from environment variables. A .env file next to where you run things is
loaded first, so you can keep your local settings there.

Environment Variables:
    THERMOGUARD_API_URL: Base URL of the API (must end with "/")
    THERMOGUARD_TIMEOUT_MS: Per-request timeout in milliseconds
    THERMOGUARD_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR

Author: ThermoGuard Team
"""

import os

from dotenv import load_dotenv


# Load environment variables from .env file
load_dotenv()


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

class Config:
    """
    Client configuration loaded from environment variables.

    Defaults match the development setup: the .NET backend running on the
    host machine, seen from the Android emulator as 10.0.2.2.
    """

    # Base URL of the .NET backend
    API_BASE_URL = os.getenv("THERMOGUARD_API_URL", "http://10.0.2.2:5285/api/")

    # How long to wait for a response before giving up (milliseconds)
    REQUEST_TIMEOUT_MS = int(os.getenv("THERMOGUARD_TIMEOUT_MS", "30000"))

    LOG_LEVEL = os.getenv("THERMOGUARD_LOG_LEVEL", "INFO")


# Sent with every request, body or not
DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


# =============================================================================
# API ENDPOINTS
# =============================================================================
# Paths are relative to Config.API_BASE_URL

SENSOR_ENDPOINT = "Sensor"
LEITURA_ENDPOINT = "Leitura"
TEMPERATURAS_ALTAS_ENDPOINT = f"{LEITURA_ENDPOINT}/temperaturas-altas"
POR_PERIODO_ENDPOINT = f"{LEITURA_ENDPOINT}/por-periodo"


def resource_endpoint(base: str, resource_id) -> str:
    """Path of a single resource, e.g. resource_endpoint("Sensor", 3) -> "Sensor/3"."""
    return f"{base}/{resource_id}"


# =============================================================================
# VALIDATION LIMITS
# =============================================================================

SENSOR_NOME_MIN_LENGTH = 3
SENSOR_NOME_MAX_LENGTH = 100
SENSOR_LOCALIZACAO_MIN_LENGTH = 3
SENSOR_LOCALIZACAO_MAX_LENGTH = 200

LEITURA_TEMPERATURA_MIN = -50
LEITURA_TEMPERATURA_MAX = 100
