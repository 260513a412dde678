"""
Temperature Classification
==========================

Turns a temperature into a band: the color/icon (and sometimes a label)
used to display it.

HOW IT WORKS:
------------
Each table is a ladder of breakpoints, coldest first. We walk down the
ladder and stop at the first breakpoint the value is STRICTLY below.
If none matches, the value belongs to the hottest band.

    LIST_BAND_TABLE (lists & reports)      CLASSIFIER_BAND_TABLE
    ---------------------------------      ---------------------------
      < 0   VeryCold  #1976D2  snow          < 0   cold     Muito Frio
      < 15  Cold      #2196F3  ...           < 10  cool     Frio
      < 25  Normal    #4CAF50                < 20  normal   Normal
      < 35  Warm      #FF9800                < 30  warm     Morno
      else  Hot       #F44336  flame         < 40  hot      Quente
                                             else  veryHot  Muito Quente

The two tables disagree, and both are in use, so they are kept apart.

Every float has a band: NaN compares False against every breakpoint and
ends up in the hottest band. Rejecting NaN is the validator's job.
"""

from thermoguard.models import ClassifierBand, ListBand, TemperatureBand


# =============================================================================
# LIST / REPORT TABLE
# =============================================================================

LIST_BAND_THRESHOLDS = {
    ListBand.VERY_COLD: 0,
    ListBand.COLD: 15,
    ListBand.NORMAL: 25,
    ListBand.WARM: 35,
    # Configured but not part of the ladder: Hot already starts at 35
    ListBand.HOT: 40,
}

LIST_BAND_TABLE = (
    (LIST_BAND_THRESHOLDS[ListBand.VERY_COLD],
     TemperatureBand(band=ListBand.VERY_COLD, color="#1976D2", icon="snow")),
    (LIST_BAND_THRESHOLDS[ListBand.COLD],
     TemperatureBand(band=ListBand.COLD, color="#2196F3", icon="partly-sunny")),
    (LIST_BAND_THRESHOLDS[ListBand.NORMAL],
     TemperatureBand(band=ListBand.NORMAL, color="#4CAF50", icon="sunny")),
    (LIST_BAND_THRESHOLDS[ListBand.WARM],
     TemperatureBand(band=ListBand.WARM, color="#FF9800", icon="thermometer")),
)
LIST_BAND_DEFAULT = TemperatureBand(band=ListBand.HOT, color="#F44336", icon="flame")


# =============================================================================
# SIX-TIER CLASSIFIER TABLE
# =============================================================================

CLASSIFIER_BAND_TABLE = (
    (0, TemperatureBand(band=ClassifierBand.COLD, color="#1976D2", status="Muito Frio", icon="snow")),
    (10, TemperatureBand(band=ClassifierBand.COOL, color="#42A5F5", status="Frio", icon="rainy")),
    (20, TemperatureBand(band=ClassifierBand.NORMAL, color="#66BB6A", status="Normal", icon="cloudy")),
    (30, TemperatureBand(band=ClassifierBand.WARM, color="#FFA726", status="Morno", icon="partly-sunny")),
    (40, TemperatureBand(band=ClassifierBand.HOT, color="#F57C00", status="Quente", icon="sunny")),
)
CLASSIFIER_BAND_DEFAULT = TemperatureBand(
    band=ClassifierBand.VERY_HOT, color="#D32F2F", status="Muito Quente", icon="flame"
)

# Readings above this get the flame icon on the high-temperature list
HIGH_TEMPERATURE_ICON_THRESHOLD = 40


def _walk(table, default: TemperatureBand, temperature: float) -> TemperatureBand:
    for breakpoint, band in table:
        if temperature < breakpoint:
            return band
    return default


def classify_list_band(temperature: float) -> TemperatureBand:
    """
    Band for the reading lists, dashboard and reports.

    Example:
        >>> classify_list_band(22.0).band
        <ListBand.NORMAL: 'Normal'>
    """
    return _walk(LIST_BAND_TABLE, LIST_BAND_DEFAULT, temperature)


def classify_temperature(temperature: float) -> TemperatureBand:
    """Six-tier band with status label, color and icon."""
    return _walk(CLASSIFIER_BAND_TABLE, CLASSIFIER_BAND_DEFAULT, temperature)


def get_temperature_color(temperature: float) -> str:
    """Display color of a temperature on the list scale."""
    return classify_list_band(temperature).color


def high_temperature_icon(temperature: float) -> str:
    return "flame" if temperature > HIGH_TEMPERATURE_ICON_THRESHOLD else "thermometer"
