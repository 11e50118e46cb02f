"""Visibility, runway visual range, present weather and cloud data."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from metar_decoder.model.markers import Unknown
from metar_decoder.model.runway import Runway

__all__ = [
    "CompassSector",
    "MetricVisibility",
    "StatuteMileVisibility",
    "HorizontalVisibility",
    "DirectionalVisibility",
    "RvrModifier",
    "RvrTrend",
    "RvrDistance",
    "RunwayVisualRange",
    "WeatherIntensity",
    "Phenomenon",
    "WeatherPhenomenon",
    "CloudDensity",
    "CloudType",
    "CloudLayer",
    "SkyCover",
    "CloudDirection",
    "AtmosphericCondition",
]


class CompassSector(str, Enum):
    NORTH = "N"
    NORTH_EAST = "NE"
    EAST = "E"
    SOUTH_EAST = "SE"
    SOUTH = "S"
    SOUTH_WEST = "SW"
    WEST = "W"
    NORTH_WEST = "NW"


@dataclass(frozen=True)
class MetricVisibility:
    metres: int


@dataclass(frozen=True)
class StatuteMileVisibility:
    """Visibility in statute miles.

    The lexical shape decides which attributes are set: ``10SM`` gives only
    ``whole``, ``1/2SM`` only the fraction, ``1 1/2SM`` all three.
    """

    whole: Optional[int] = None
    numerator: Optional[int] = None
    denominator: Optional[int] = None

    @property
    def miles(self) -> float:
        total = float(self.whole or 0)
        if self.numerator is not None and self.denominator:
            total += self.numerator / self.denominator
        return total


HorizontalVisibility = Union[Unknown, MetricVisibility, StatuteMileVisibility]


@dataclass(frozen=True)
class DirectionalVisibility:
    visibility: HorizontalVisibility
    sector: CompassSector


class RvrModifier(str, Enum):
    AT_LEAST = "P"
    AT_MOST = "M"


class RvrTrend(str, Enum):
    INCREASING = "U"
    DECREASING = "D"
    NO_CHANGE = "N"


@dataclass(frozen=True)
class RvrDistance:
    value: int
    modifier: Optional[RvrModifier] = None


@dataclass(frozen=True)
class RunwayVisualRange:
    """Runway visual range, a single distance or a ``min V max`` range."""

    runway: Runway
    distance: RvrDistance
    max_distance: Optional[RvrDistance] = None
    feet: bool = False
    trend: Optional[RvrTrend] = None

    @property
    def is_range(self) -> bool:
        return self.max_distance is not None


class WeatherIntensity(str, Enum):
    LIGHT = "-"
    HEAVY = "+"
    IN_VICINITY = "VC"


class Phenomenon(str, Enum):
    # Descriptors
    SHALLOW = "MI"
    PARTIAL = "PR"
    PATCHES = "BC"
    LOW_DRIFTING = "DR"
    BLOWING = "BL"
    SHOWERS = "SH"
    THUNDERSTORM = "TS"
    FREEZING = "FZ"
    # Precipitation
    RAIN = "RA"
    DRIZZLE = "DZ"
    SNOW = "SN"
    SNOW_GRAINS = "SG"
    ICE_CRYSTALS = "IC"
    ICE_PELLETS = "PL"
    HAIL = "GR"
    SMALL_HAIL = "GS"
    UNKNOWN_PRECIPITATION = "UP"
    # Obscuration
    FOG = "FG"
    VOLCANIC_ASH = "VA"
    MIST = "BR"
    HAZE = "HZ"
    WIDESPREAD_DUST = "DU"
    SMOKE = "FU"
    SAND = "SA"
    SPRAY = "PY"
    # Other
    SQUALL = "SQ"
    DUST_WHIRLS = "PO"
    DUSTSTORM = "DS"
    SANDSTORM = "SS"
    FUNNEL_CLOUD = "FC"


@dataclass(frozen=True)
class WeatherPhenomenon:
    """One present-weather group, e.g. ``-SHRA`` or ``VCTS``."""

    codes: Tuple[Phenomenon, ...]
    intensity: Optional[WeatherIntensity] = None


class CloudDensity(str, Enum):
    FEW = "FEW"
    SCATTERED = "SCT"
    BROKEN = "BKN"
    OVERCAST = "OVC"


class CloudType(str, Enum):
    CUMULONIMBUS = "CB"
    TOWERING_CUMULUS = "TCU"


@dataclass(frozen=True)
class CloudLayer:
    """A cloud layer; ``floor`` is in hundreds of feet."""

    density: Union[CloudDensity, Unknown]
    floor: Union[int, Unknown]
    cloud_type: Union[CloudType, Unknown, None] = None

    @property
    def floor_feet(self) -> Optional[int]:
        return self.floor * 100 if isinstance(self.floor, int) else None


class SkyCover(str, Enum):
    SKY_CLEAR = "SKC"
    CLEAR = "CLR"
    NO_CLOUD_DETECTED = "NCD"
    NO_SIGNIFICANT_CLOUD = "NSC"


@dataclass(frozen=True)
class CloudDirection:
    """Cloud type observed in one or more compass sectors (``CB/NE/E``)."""

    cloud_type: Union[CloudType, Unknown]
    sectors: Tuple[CompassSector, ...]


@dataclass(frozen=True)
class AtmosphericCondition:
    """Visibility, weather and sky block of a report or trend forecast.

    ``cavok`` is set for the ``CAVOK`` group, in which case nothing else is
    populated. ``sky`` carries the SKC/CLR/NCD/NSC marker when one was
    reported instead of cloud layers. ``vertical_visibility`` is in hundreds
    of feet.
    """

    cavok: bool = False
    visibility: Optional[HorizontalVisibility] = None
    directional_visibility: Tuple[DirectionalVisibility, ...] = ()
    runway_visual_ranges: Tuple[RunwayVisualRange, ...] = ()
    weather: Tuple[Union[WeatherPhenomenon, Unknown], ...] = ()
    vertical_visibility: Union[int, Unknown, None] = None
    sky: Optional[SkyCover] = None
    clouds: Tuple[CloudLayer, ...] = ()
