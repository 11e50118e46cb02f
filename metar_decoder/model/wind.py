"""Surface wind as reported in the wind group (``dddffGggUU``)."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from metar_decoder.model.markers import Unknown, Variable

__all__ = ["WindUnit", "WindSpeed", "Wind", "WindVariation"]


class WindUnit(str, Enum):
    KNOTS = "KT"
    METRES_PER_SECOND = "MPS"
    KILOMETRES_PER_HOUR = "KPH"


@dataclass(frozen=True)
class WindSpeed:
    """Mean wind speed; ``at_least`` is set for the ``P`` (above range) prefix."""

    value: int
    at_least: bool = False


@dataclass(frozen=True)
class Wind:
    """Wind direction, speed, optional gust and unit.

    ``direction`` is degrees (the digit shape admits 000-369), ``VARIABLE`` or
    ``UNKNOWN``; ``speed`` is a :class:`WindSpeed` or ``UNKNOWN``.
    """

    direction: Union[int, Variable, Unknown]
    speed: Union[WindSpeed, Unknown]
    unit: WindUnit
    gust: Optional[int] = None


@dataclass(frozen=True)
class WindVariation:
    """Extreme directions between which the wind is varying (``dddVddd``)."""

    from_direction: int
    to_direction: int
