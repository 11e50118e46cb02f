"""Decoded report and its top-level groups.

A :class:`Report` is built once by :func:`metar_decoder.parser.decoder.decode`
and never mutated afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional, Tuple, Union

from metar_decoder.model.atmosphere import AtmosphericCondition, CloudDirection, Phenomenon
from metar_decoder.model.markers import Unknown
from metar_decoder.model.runway import RunwayState, Windshear
from metar_decoder.model.wind import Wind, WindVariation

__all__ = [
    "ReportType",
    "ObservationTime",
    "TemperatureDewpoint",
    "PressureKind",
    "Pressure",
    "RecentWeather",
    "SeaCondition",
    "ColourCode",
    "TrendKind",
    "ChangeIndicator",
    "ChangeTime",
    "TrendForecast",
    "Report",
]


class ReportType(str, Enum):
    METAR = "METAR"
    SPECI = "SPECI"


@dataclass(frozen=True)
class ObservationTime:
    day: int
    hour: int
    minute: int

    def __str__(self) -> str:
        return f"{self.day:02d}{self.hour:02d}{self.minute:02d}Z"


@dataclass(frozen=True)
class TemperatureDewpoint:
    """Air temperature and dewpoint in whole degrees Celsius."""

    temperature: Union[int, Unknown]
    dewpoint: Union[int, Unknown]


class PressureKind(str, Enum):
    SEA_LEVEL_HECTOPASCALS = "Q"
    ALTIMETER_INCHES = "A"


@dataclass(frozen=True)
class Pressure:
    """Pressure group; ``value`` holds the four coded digits (``Q1013``, ``A2992``)."""

    kind: PressureKind
    value: Union[int, Unknown]


@dataclass(frozen=True)
class RecentWeather:
    codes: Tuple[Phenomenon, ...]


@dataclass(frozen=True)
class SeaCondition:
    """Sea-surface temperature with either a state of sea or a wave height.

    ``W15/S4`` carries the WMO state-of-sea code (0-9); ``W15/H14`` a
    significant wave height in decimetres. Exactly one of ``state`` and
    ``wave_height`` is set.
    """

    temperature: Union[int, Unknown]
    state: Union[int, Unknown, None] = None
    wave_height: Union[int, Unknown, None] = None


class ColourCode(str, Enum):
    BLUE_PLUS = "BLU+"
    BLUE = "BLU"
    WHITE = "WHT"
    GREEN = "GRN"
    YELLOW = "YLO"
    AMBER = "AMB"
    RED = "RED"


class TrendKind(str, Enum):
    NO_SIGNIFICANT_CHANGE = "NOSIG"
    BECOMING = "BECMG"
    TEMPORARY = "TEMPO"


class ChangeIndicator(str, Enum):
    FROM = "FM"
    UNTIL = "TL"
    AT = "AT"


@dataclass(frozen=True)
class ChangeTime:
    indicator: ChangeIndicator
    hour: int
    minute: int


@dataclass(frozen=True)
class TrendForecast:
    """A trend forecast; ``NOSIG`` carries none of the nested conditions."""

    kind: TrendKind
    change_times: Tuple[ChangeTime, ...] = ()
    no_significant_weather: bool = False
    wind: Optional[Wind] = None
    wind_variation: Optional[WindVariation] = None
    conditions: Optional[AtmosphericCondition] = None


@dataclass(frozen=True)
class Report:
    """A complete decoded report."""

    station: str
    time: ObservationTime
    report_type: Optional[ReportType] = None
    corrected: bool = False
    auto: bool = False
    wind: Optional[Wind] = None
    wind_variation: Optional[WindVariation] = None
    atmospheric: Optional[AtmosphericCondition] = None
    temperature: Optional[TemperatureDewpoint] = None
    pressure: Optional[Pressure] = None
    recent_weather: Tuple[Union[RecentWeather, Unknown], ...] = ()
    colour_code: Union[ColourCode, Unknown, None] = None
    windshear: Tuple[Windshear, ...] = ()
    runway_states: Tuple[RunwayState, ...] = ()
    sea_condition: Optional[SeaCondition] = None
    trends: Tuple[TrendForecast, ...] = ()
    cloud_directions: Tuple[CloudDirection, ...] = ()
    remarks: Optional[str] = None

    # ------------------------------------------------------------------
    # Pretty representation helpers
    # ------------------------------------------------------------------
    def __rich_repr__(self):
        for field in fields(self):
            value = getattr(self, field.name)
            if value is None or value == () or value is False:
                continue
            yield field.name, value
