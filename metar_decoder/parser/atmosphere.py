"""Atmospheric block: visibility, RVR, present weather and cloud groups.

The block is an ordered choice. ``CAVOK`` and ``SKC`` stand alone; anything
else is a sequence of optional and repeated groups::

    visibility? directional* rvr* ( SKC | CLR
                                  | weather* ( VV | NCD | NSC | CLR | cloud* ) )

Every group inside the block is a separate token, so a malformed group is
simply left for whatever field follows the block.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple, Union

from metar_decoder.model.atmosphere import (
    AtmosphericCondition,
    CloudDensity,
    CloudDirection,
    CloudLayer,
    CloudType,
    CompassSector,
    DirectionalVisibility,
    HorizontalVisibility,
    MetricVisibility,
    Phenomenon,
    RunwayVisualRange,
    RvrDistance,
    RvrModifier,
    RvrTrend,
    SkyCover,
    StatuteMileVisibility,
    WeatherIntensity,
    WeatherPhenomenon,
)
from metar_decoder.model.markers import UNKNOWN, Unknown
from metar_decoder.parser.cursor import Cursor, keyword
from metar_decoder.parser.runway import runway_designator

__all__ = [
    "horizontal_visibility",
    "compass_sector",
    "directional_visibility",
    "runway_visual_range",
    "phenomenon_codes",
    "present_weather",
    "vertical_visibility",
    "cloud_layer",
    "atmospheric_condition",
    "cloud_direction",
]

PHENOMENA: Dict[str, Phenomenon] = {p.value: p for p in Phenomenon}

# Two-letter sectors before their one-letter prefixes.
SECTORS = ("NE", "NW", "SE", "SW", "N", "E", "S", "W")


# ---------------------------------------------------------------------------
# Visibility
# ---------------------------------------------------------------------------


def _whole_miles(cursor: Cursor) -> Optional[StatuteMileVisibility]:
    whole = cursor.digit_run(1, 2)
    if whole is None or not cursor.literal("SM"):
        return None
    return StatuteMileVisibility(whole=int(whole))


def _fraction(cursor: Cursor, whole: Optional[int] = None) -> Optional[StatuteMileVisibility]:
    numerator = cursor.digits(1)
    if numerator is None or not cursor.literal("/"):
        return None
    denominator = cursor.digit_run(1, 2)
    if denominator is None or not cursor.literal("SM"):
        return None
    return StatuteMileVisibility(whole=whole, numerator=int(numerator), denominator=int(denominator))


def _mixed_miles(cursor: Cursor) -> Optional[StatuteMileVisibility]:
    whole = cursor.digits(1)
    if whole is None or not cursor.literal(" "):
        return None
    return _fraction(cursor, whole=int(whole))


def horizontal_visibility(cursor: Cursor) -> Optional[HorizontalVisibility]:
    """Prevailing visibility; the first matching lexical shape wins.

    ``////`` is unknown, four digits are metres, then whole statute miles
    (``10SM``), a mixed number (``1 1/2SM``) and a plain fraction (``3/4SM``).
    """
    if cursor.slashes(4):
        return UNKNOWN
    metres = cursor.digits(4)
    if metres is not None:
        return MetricVisibility(int(metres))
    return cursor.choice(_whole_miles, _mixed_miles, _fraction)


def compass_sector(cursor: Cursor) -> Optional[CompassSector]:
    sector = cursor.one_of(SECTORS)
    return CompassSector(sector) if sector is not None else None


def directional_visibility(cursor: Cursor) -> Optional[DirectionalVisibility]:
    visibility = horizontal_visibility(cursor)
    if visibility is None:
        return None
    sector = compass_sector(cursor)
    if sector is None:
        return None
    return DirectionalVisibility(visibility, sector)


# ---------------------------------------------------------------------------
# Runway visual range
# ---------------------------------------------------------------------------


def _rvr_distance(cursor: Cursor) -> Optional[RvrDistance]:
    modifier = cursor.one_of(("P", "M"))
    value = cursor.digits(4)
    if value is None:
        return None
    return RvrDistance(int(value), RvrModifier(modifier) if modifier else None)


def runway_visual_range(cursor: Cursor) -> Optional[RunwayVisualRange]:
    """``R24/1200``, ``R09L/P1500VM2000FTU`` and everything in between."""
    if not cursor.literal("R"):
        return None
    runway = runway_designator(cursor)
    if runway is None or not cursor.literal("/"):
        return None
    distance = _rvr_distance(cursor)
    if distance is None:
        return None

    max_distance = None
    if cursor.literal("V"):
        max_distance = _rvr_distance(cursor)
        if max_distance is None:
            return None

    feet = cursor.literal("FT")
    trend = cursor.one_of(("U", "D", "N"))
    return RunwayVisualRange(
        runway=runway,
        distance=distance,
        max_distance=max_distance,
        feet=feet,
        trend=RvrTrend(trend) if trend else None,
    )


# ---------------------------------------------------------------------------
# Present weather
# ---------------------------------------------------------------------------


def phenomenon_codes(cursor: Cursor) -> Optional[Tuple[Phenomenon, ...]]:
    """A run of one or more two-letter phenomenon codes (``SHRA``, ``BR``)."""
    codes = []
    while cursor.peek(2) in PHENOMENA:
        codes.append(PHENOMENA[cursor.peek(2)])
        cursor.pos += 2
    return tuple(codes) or None


def present_weather(cursor: Cursor) -> Union[WeatherPhenomenon, Unknown, None]:
    if cursor.slashes(2):
        return UNKNOWN
    intensity = cursor.one_of(("+", "-", "VC"))
    codes = phenomenon_codes(cursor)
    if codes is None:
        return None
    return WeatherPhenomenon(codes, WeatherIntensity(intensity) if intensity else None)


# ---------------------------------------------------------------------------
# Clouds
# ---------------------------------------------------------------------------


def vertical_visibility(cursor: Cursor) -> Union[int, Unknown, None]:
    if not cursor.literal("VV"):
        return None
    if cursor.slashes(3):
        return UNKNOWN
    height = cursor.digits(3)
    return int(height) if height is not None else None


def _cloud_type(cursor: Cursor) -> Union[CloudType, Unknown, None]:
    if cursor.slashes(3):
        return UNKNOWN
    kind = cursor.one_of(("TCU", "CB"))
    return CloudType(kind) if kind is not None else None


def cloud_layer(cursor: Cursor) -> Optional[CloudLayer]:
    """``FEW030``, ``BKN008CB``, ``//////`` and friends."""
    if cursor.slashes(3):
        density: Union[CloudDensity, Unknown] = UNKNOWN
    else:
        code = cursor.one_of(("FEW", "SCT", "BKN", "OVC"))
        if code is None:
            return None
        density = CloudDensity(code)

    if cursor.slashes(3):
        floor: Union[int, Unknown] = UNKNOWN
    else:
        height = cursor.digits(3)
        if height is None:
            return None
        floor = int(height)

    return CloudLayer(density, floor, _cloud_type(cursor))


def _sky_cover(*codes: str) -> Callable[[Cursor], Optional[SkyCover]]:
    def parse(cursor: Cursor) -> Optional[SkyCover]:
        code = cursor.one_of(codes)
        return SkyCover(code) if code is not None else None

    return parse


def atmospheric_condition(cursor: Cursor) -> Optional[AtmosphericCondition]:
    """The whole visibility/weather/sky block; ``None`` when nothing matched."""
    if cursor.token(keyword("CAVOK"), "CAVOK") is not None:
        return AtmosphericCondition(cavok=True)
    if cursor.token(keyword("SKC"), "sky clear") is not None:
        return AtmosphericCondition(sky=SkyCover.SKY_CLEAR)

    start = cursor.pos
    visibility = cursor.token(horizontal_visibility, "visibility")
    directional = cursor.repeat(directional_visibility, "directional visibility")
    ranges = cursor.repeat(runway_visual_range, "runway visual range")

    weather: Tuple[Union[WeatherPhenomenon, Unknown], ...] = ()
    vertical = None
    clouds: Tuple[CloudLayer, ...] = ()
    sky = cursor.token(_sky_cover("SKC", "CLR"), "sky clear")
    if sky is None:
        weather = cursor.repeat(present_weather, "present weather")
        vertical = cursor.token(vertical_visibility, "vertical visibility")
        if vertical is None:
            sky = cursor.token(_sky_cover("NCD", "NSC", "CLR"), "cloud cover")
            if sky is None:
                clouds = cursor.repeat(cloud_layer, "cloud layer")

    if cursor.pos == start:
        return None
    return AtmosphericCondition(
        visibility=visibility,
        directional_visibility=directional,
        runway_visual_ranges=ranges,
        weather=weather,
        vertical_visibility=vertical,
        sky=sky,
        clouds=clouds,
    )


# ---------------------------------------------------------------------------
# Cloud direction
# ---------------------------------------------------------------------------


def _sector_entry(cursor: Cursor) -> Optional[CompassSector]:
    if not cursor.literal("/"):
        return None
    return compass_sector(cursor)


def cloud_direction(cursor: Cursor) -> Optional[CloudDirection]:
    """Cloud type seen in one or more sectors, e.g. ``CB/NE/E``."""
    cloud_type = _cloud_type(cursor)
    if cloud_type is None:
        return None
    sectors = cursor.repeat(_sector_entry, "cloud direction sector", spaced=False)
    if not sectors:
        return None
    return CloudDirection(cloud_type, sectors)
