"""Wind group (``18012G25KT``) and wind variation (``140V220``)."""
from __future__ import annotations

from typing import Optional, Union

from metar_decoder.model.markers import UNKNOWN, VARIABLE, Unknown, Variable
from metar_decoder.model.wind import Wind, WindSpeed, WindUnit, WindVariation
from metar_decoder.parser.cursor import DIGITS, Cursor

__all__ = ["wind_direction", "wind", "wind_variation"]

WIND_UNITS = ("KT", "MPS", "KPH")


def wind_direction(cursor: Cursor) -> Optional[int]:
    """Three-digit heading; the shape admits 000-369."""
    digits = cursor.chars("012", DIGITS, DIGITS) or cursor.chars("3", "0123456", DIGITS)
    return int(digits) if digits is not None else None


def _direction(cursor: Cursor) -> Union[int, Variable, Unknown, None]:
    if cursor.slashes(3):
        return UNKNOWN
    if cursor.literal("VRB"):
        return VARIABLE
    return wind_direction(cursor)


def _speed(cursor: Cursor) -> Union[WindSpeed, Unknown, None]:
    if cursor.slashes(2):
        return UNKNOWN
    at_least = cursor.literal("P")
    digits = cursor.digit_run(2, 3)
    if digits is None:
        return None
    return WindSpeed(int(digits), at_least=at_least)


def wind(cursor: Cursor) -> Optional[Wind]:
    direction = _direction(cursor)
    if direction is None:
        return None
    speed = _speed(cursor)
    if speed is None:
        return None

    gust = None
    if cursor.literal("G"):
        digits = cursor.digits(2)
        if digits is None:
            return None
        gust = int(digits)

    unit = cursor.one_of(WIND_UNITS)
    if unit is None:
        return None
    return Wind(direction=direction, speed=speed, unit=WindUnit(unit), gust=gust)


def wind_variation(cursor: Cursor) -> Optional[WindVariation]:
    start = wind_direction(cursor)
    if start is None or not cursor.literal("V"):
        return None
    end = wind_direction(cursor)
    if end is None:
        return None
    return WindVariation(from_direction=start, to_direction=end)
