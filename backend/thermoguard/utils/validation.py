"""
Input Validation Utilities
===========================

Validation rules for Sensor and Leitura payloads, plus the parse helpers
that turn free-text form input into real numbers and timestamps.

Two layers:

1. PARSE - parse_temperatura(), parse_sensor_id(), parse_data_hora()
   Turn "25,5" into 25.5 or raise NotANumber / InvalidTimestamp.
   Nothing here ever returns NaN or a made-up default.

2. VALIDATE - validate_sensor_data(), validate_leitura_data()
   Check every field, collect one Portuguese message per bad field,
   and return a ValidationResult. Never raises, never does I/O.

Payloads are keyed by the wire names the API uses:
    Sensor:  {"nome": ..., "localizacao": ...}
    Leitura: {"dataHora": ..., "temperatura": ..., "sensorId": ...}
"""

import math
import re
from datetime import datetime, timezone
from typing import Any, Mapping

from pydantic import BaseModel

from thermoguard.config import (
    SENSOR_NOME_MIN_LENGTH,
    SENSOR_NOME_MAX_LENGTH,
    SENSOR_LOCALIZACAO_MIN_LENGTH,
    SENSOR_LOCALIZACAO_MAX_LENGTH,
    LEITURA_TEMPERATURA_MIN,
    LEITURA_TEMPERATURA_MAX,
)
from thermoguard.exceptions import InvalidTimestamp, NotANumber
from thermoguard.models import ValidationResult


# .NET sends up to 7 fractional digits, datetime takes at most 6
_EXTRA_FRACTION = re.compile(r"(\.\d{6})\d+")

# Plain form text only: no "_" separators, no "nan"/"inf", ASCII digits
_DECIMAL_TEXT = re.compile(r"[+-]?([0-9]+([.,][0-9]*)?|[.,][0-9]+)([eE][+-]?[0-9]+)?")
_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# PARSING
# =============================================================================

def parse_temperatura(value: Any) -> float:
    """
    Parse a temperature from a number or a string.

    Accepts "25.5", "25,5" and " -3 ". Rejects booleans, NaN and infinity.

    Args:
        value: Raw input (number or text)

    Returns:
        The temperature as a float

    Raises:
        NotANumber: If the value isn't a finite number
    """
    if isinstance(value, bool):
        raise NotANumber(value, "temperatura")

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _DECIMAL_TEXT.fullmatch(text):
            raise NotANumber(value, "temperatura")
        number = float(text.replace(",", "."))
    else:
        raise NotANumber(value, "temperatura")

    if not math.isfinite(number):
        raise NotANumber(value, "temperatura")
    return number


def parse_sensor_id(value: Any) -> int:
    """
    Parse a sensor id from an int, a whole float or a digit string.

    Raises:
        NotANumber: If the value isn't a whole number
    """
    if isinstance(value, bool):
        raise NotANumber(value, "sensorId")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        raise NotANumber(value, "sensorId")
    if isinstance(value, str):
        text = value.strip()
        if not _INTEGER_TEXT.fullmatch(text):
            raise NotANumber(value, "sensorId")
        return int(text)
    raise NotANumber(value, "sensorId")


def parse_data_hora(value: Any) -> datetime:
    """
    Parse a timestamp into a timezone-aware datetime.

    Accepts datetime objects and ISO-8601 strings such as
    "2024-05-01T10:00:00Z", "2024-05-01T10:00:00.000+00:00" or the
    .NET style "2024-05-01T10:00:00.1234567".

    A timestamp without an offset is taken as UTC.

    Raises:
        InvalidTimestamp: If the value can't be read as an instant
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = _EXTRA_FRACTION.sub(r"\1", value.strip())
        if text[-1] in "Zz":
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidTimestamp(value, "dataHora")
    else:
        raise InvalidTimestamp(value, "dataHora")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_data_hora(value: datetime) -> str:
    """
    Serialize a timestamp the way the API expects it.

    Always UTC, millisecond precision, "Z" suffix:
        2024-05-01T10:00:00.000Z
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# =============================================================================
# VALIDATION
# =============================================================================

def _as_mapping(data: Any) -> Mapping:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True)
    if data is None:
        return {}
    return data


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _check_text(value: Any, required_msg: str, label: str, min_length: int, max_length: int):
    """First failing rule wins: required, then min length, then max length."""
    if not isinstance(value, str) or not value.strip():
        return required_msg
    length = len(value.strip())
    if length < min_length:
        return f"{label} deve ter pelo menos {min_length} caracteres."
    if length > max_length:
        return f"{label} deve ter no máximo {max_length} caracteres."
    return None


def validate_sensor_data(data: Any) -> ValidationResult:
    """
    Validate a Sensor payload.

    Args:
        data: Mapping with "nome" and "localizacao" (or a Sensor model)

    Returns:
        ValidationResult with an error for each bad field

    Example:
        >>> validate_sensor_data({"nome": "ab", "localizacao": "Galpão B"}).errors
        {'nome': 'O nome deve ter pelo menos 3 caracteres.'}
    """
    data = _as_mapping(data)
    errors = {}

    nome_error = _check_text(
        data.get("nome"),
        "O nome do sensor é obrigatório.",
        "O nome",
        SENSOR_NOME_MIN_LENGTH,
        SENSOR_NOME_MAX_LENGTH,
    )
    if nome_error:
        errors["nome"] = nome_error

    localizacao_error = _check_text(
        data.get("localizacao"),
        "A localização é obrigatória.",
        "A localização",
        SENSOR_LOCALIZACAO_MIN_LENGTH,
        SENSOR_LOCALIZACAO_MAX_LENGTH,
    )
    if localizacao_error:
        errors["localizacao"] = localizacao_error

    return ValidationResult.from_errors(errors)


def validate_leitura_data(data: Any) -> ValidationResult:
    """
    Validate a Leitura payload.

    Every field is checked, so one call reports all the problems at once.

    Args:
        data: Mapping with "dataHora", "temperatura" and "sensorId"
              (values may be raw form strings)

    Returns:
        ValidationResult with an error for each bad field
    """
    data = _as_mapping(data)
    errors = {}

    data_hora = data.get("dataHora")
    if _is_missing(data_hora):
        errors["dataHora"] = "A data e hora são obrigatórias."
    else:
        try:
            parse_data_hora(data_hora)
        except InvalidTimestamp:
            errors["dataHora"] = "Data e hora inválidas."

    temperatura = data.get("temperatura")
    if _is_missing(temperatura):
        errors["temperatura"] = "A temperatura é obrigatória."
    else:
        try:
            value = parse_temperatura(temperatura)
        except NotANumber:
            errors["temperatura"] = "A temperatura deve ser um número válido."
        else:
            if not LEITURA_TEMPERATURA_MIN <= value <= LEITURA_TEMPERATURA_MAX:
                errors["temperatura"] = (
                    f"A temperatura deve estar entre {LEITURA_TEMPERATURA_MIN}°C "
                    f"e {LEITURA_TEMPERATURA_MAX}°C."
                )

    try:
        sensor_id = parse_sensor_id(data.get("sensorId"))
    except NotANumber:
        sensor_id = 0
    if sensor_id <= 0:
        errors["sensorId"] = "Um sensor válido deve ser selecionado."

    return ValidationResult.from_errors(errors)


def validate_period(inicio: Any, fim: Any) -> ValidationResult:
    """
    Check a report period before asking the API for it.

    The API call itself does not check the order, so this must run first.
    """
    errors = {}
    try:
        if parse_data_hora(inicio) > parse_data_hora(fim):
            errors["periodo"] = "A data de início não pode ser maior que a data de fim."
    except InvalidTimestamp:
        errors["periodo"] = "Data e hora inválidas."
    return ValidationResult.from_errors(errors)
