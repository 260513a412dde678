"""
ThermoGuard Exceptions
======================

Every failure the client can produce is one of these. They all inherit
from ThermoGuardError, and str(error) is always a single message you can
show to a user as-is.

    ThermoGuardError
    ├── ValidationFailed   - payload rejected locally, nothing was sent
    ├── RequestTimeout     - no response before the deadline
    ├── HttpError          - the API answered with a non-2xx status
    ├── MalformedResponse  - the API answered 2xx but the body is garbage
    ├── NetworkError       - never reached the API (DNS, refused, reset...)
    ├── DomainError        - response decoded but can't become a Sensor/Leitura
    ├── NotANumber         - free-text input isn't a number
    └── InvalidTimestamp   - free-text input isn't a date/time

A RequestTimeout on a POST/PUT/DELETE does NOT mean the change failed.
The server may have applied it; treat the outcome as unknown.
"""

from typing import Optional


class ThermoGuardError(Exception):
    """Base exception for the ThermoGuard client."""

    def __init__(self, message: str, endpoint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint


class ValidationFailed(ThermoGuardError):
    """Payload failed local validation. Carries the field -> message map."""

    def __init__(self, errors: dict, endpoint: Optional[str] = None):
        message = f"Dados inválidos: {', '.join(errors.values())}"
        super().__init__(message, endpoint)
        self.errors = dict(errors)


class RequestTimeout(ThermoGuardError):
    """The request deadline elapsed before a response arrived."""

    def __init__(self, endpoint: str, timeout: float):
        super().__init__(
            f"Tempo limite de {timeout:g}s excedido para {endpoint}",
            endpoint,
        )
        self.timeout = timeout


class HttpError(ThermoGuardError):
    """Non-2xx response, with the message extracted from the error body."""

    def __init__(self, message: str, status_code: int, endpoint: str, envelope=None):
        super().__init__(message, endpoint)
        self.status_code = status_code
        self.envelope = envelope


class MalformedResponse(ThermoGuardError):
    """2xx response whose body could not be decoded."""

    pass


class NetworkError(ThermoGuardError):
    """Transport failure below HTTP (unreachable host, connection reset...)."""

    pass


class DomainError(ThermoGuardError):
    """Response data that can't be turned into a domain object."""

    pass


class NotANumber(ThermoGuardError, ValueError):
    """A value that was supposed to be numeric isn't."""

    def __init__(self, value, field: Optional[str] = None):
        label = field or "valor"
        super().__init__(f"{label} não é um número válido: {value!r}")
        self.value = value
        self.field = field


class InvalidTimestamp(ThermoGuardError, ValueError):
    """A value that was supposed to be a date/time isn't."""

    def __init__(self, value, field: Optional[str] = None):
        label = field or "valor"
        super().__init__(f"{label} não é uma data/hora válida: {value!r}")
        self.value = value
        self.field = field
