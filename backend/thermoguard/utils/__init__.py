"""
Utility modules for the ThermoGuard client.
"""

from thermoguard.utils.validation import (
    parse_temperatura,
    parse_sensor_id,
    parse_data_hora,
    format_data_hora,
    validate_sensor_data,
    validate_leitura_data,
    validate_period,
)
from thermoguard.utils.temperature import (
    classify_list_band,
    classify_temperature,
    get_temperature_color,
    high_temperature_icon,
)

__all__ = [
    "parse_temperatura",
    "parse_sensor_id",
    "parse_data_hora",
    "format_data_hora",
    "validate_sensor_data",
    "validate_leitura_data",
    "validate_period",
    "classify_list_band",
    "classify_temperature",
    "get_temperature_color",
    "high_temperature_icon",
]
