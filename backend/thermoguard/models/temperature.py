"""
Temperature Band Models
=======================

A band is a named temperature range with the color (and sometimes the
status label and icon) used to display it.

There are TWO band scales and they do not agree on the breakpoints:

    ListBand       - 5 bands, used by the reading lists and reports
    ClassifierBand - 6 bands, used by the general temperature classifier

Both are kept on purpose. See thermoguard.utils.temperature for the
threshold tables.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class ListBand(str, Enum):
    """Bands of the list/report scale, coldest first."""
    VERY_COLD = "VeryCold"
    COLD = "Cold"
    NORMAL = "Normal"
    WARM = "Warm"
    HOT = "Hot"


class ClassifierBand(str, Enum):
    """Bands of the six-tier classifier scale, coldest first."""
    COLD = "cold"
    COOL = "cool"
    NORMAL = "normal"
    WARM = "warm"
    HOT = "hot"
    VERY_HOT = "veryHot"


class TemperatureBand(BaseModel):
    """
    Result of classifying a temperature.

    Fields:
        band: Which band the value fell in
        color: Hex display color (e.g. "#4CAF50")
        status: Portuguese label, only on the classifier scale
        icon: Icon name for the band
    """
    model_config = ConfigDict(frozen=True)

    band: Union[ListBand, ClassifierBand]
    color: str
    status: Optional[str] = None
    icon: Optional[str] = None
