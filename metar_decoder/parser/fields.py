"""Scalar report fields.

Station, observation time, the AUTO/COR/CCA flags, temperature, pressure,
recent weather, sea condition, colour code and remarks. Each parser works on
a bare token; separators are handled by :meth:`Cursor.token`.
"""
from __future__ import annotations

from typing import Optional, Union

from metar_decoder.errors import FieldShapeError
from metar_decoder.model.markers import UNKNOWN, Unknown
from metar_decoder.model.report import (
    ColourCode,
    ObservationTime,
    Pressure,
    PressureKind,
    RecentWeather,
    ReportType,
    SeaCondition,
    TemperatureDewpoint,
)
from metar_decoder.parser.atmosphere import phenomenon_codes
from metar_decoder.parser.cursor import ALNUM, DIGITS, Cursor

__all__ = [
    "report_type",
    "correction_flag",
    "station",
    "observation_time",
    "temperature_dewpoint",
    "pressure",
    "recent_weather",
    "sea_condition",
    "colour_code",
    "remarks",
]

# Longer spellings first so BLU+ is not read as BLU.
COLOUR_CODES = ("BLU+", "BLU", "WHT", "GRN", "YLO", "AMB", "RED")

REMARK_CHARS = ALNUM + "$/- "


def report_type(cursor: Cursor) -> Optional[ReportType]:
    """Leading ``METAR``/``SPECI`` marker together with its separator."""
    kind = cursor.one_of(("METAR", "SPECI"))
    if kind is None or not cursor.literal(" "):
        return None
    return ReportType(kind)


def correction_flag(cursor: Cursor) -> Optional[str]:
    """``AUTO``, ``COR`` or ``CCA``; the last two mark a corrected report."""
    return cursor.one_of(("AUTO", "COR", "CCA"))


def station(cursor: Cursor) -> Optional[str]:
    code = cursor.letters(4)
    if code is None or not cursor.at_boundary():
        return None
    return code


def observation_time(cursor: Cursor) -> Optional[ObservationTime]:
    """``DDHHMMZ`` with day 01-31, hour 00-23 and minute 00-59."""
    day = cursor.chars("012", DIGITS) or cursor.chars("3", "01")
    if day is None:
        return None
    hour = cursor.chars("01", DIGITS) or cursor.chars("2", "0123")
    if hour is None:
        return None
    minute = cursor.chars("012345", DIGITS)
    if minute is None or not cursor.literal("Z"):
        return None
    return ObservationTime(day=int(day), hour=int(hour), minute=int(minute))


# ---------------------------------------------------------------------------
# Temperature and pressure
# ---------------------------------------------------------------------------


def _temperature_value(cursor: Cursor) -> Union[int, Unknown, None]:
    if cursor.slashes(2):
        return UNKNOWN
    negative = cursor.literal("M")
    digits = cursor.digits(2)
    if digits is None:
        return None
    return -int(digits) if negative else int(digits)


def temperature_dewpoint(cursor: Cursor) -> Optional[TemperatureDewpoint]:
    temperature = _temperature_value(cursor)
    if temperature is None or not cursor.literal("/"):
        return None
    dewpoint = _temperature_value(cursor)
    if dewpoint is None:
        return None
    return TemperatureDewpoint(temperature=temperature, dewpoint=dewpoint)


def pressure(cursor: Cursor) -> Optional[Pressure]:
    kind = cursor.one_of(("Q", "A"))
    if kind is None:
        return None
    if cursor.slashes(4):
        return Pressure(PressureKind(kind), UNKNOWN)
    digits = cursor.digits(4)
    if digits is None:
        return None
    return Pressure(PressureKind(kind), int(digits))


# ---------------------------------------------------------------------------
# Supplementary groups
# ---------------------------------------------------------------------------


def recent_weather(cursor: Cursor) -> Union[RecentWeather, Unknown, None]:
    if not cursor.literal("RE"):
        return None
    if cursor.slashes(2):
        return UNKNOWN
    codes = phenomenon_codes(cursor)
    return RecentWeather(codes) if codes else None


def _sea_state(cursor: Cursor) -> Union[int, Unknown, None]:
    if cursor.slashes(1):
        return UNKNOWN
    digit = cursor.digits(1)
    return int(digit) if digit is not None else None


def _wave_height(cursor: Cursor) -> Union[int, Unknown, None]:
    if cursor.slashes(3):
        return UNKNOWN
    height = cursor.digit_run(1, 3)
    return int(height) if height is not None else None


def sea_condition(cursor: Cursor) -> Optional[SeaCondition]:
    """``W15/S4`` (state of sea) or ``W15/H14`` (wave height in decimetres)."""
    if not cursor.literal("W"):
        return None
    temperature = _temperature_value(cursor)
    if temperature is None or not cursor.literal("/"):
        return None
    if cursor.literal("S"):
        state = _sea_state(cursor)
        return SeaCondition(temperature, state=state) if state is not None else None
    if cursor.literal("H"):
        height = _wave_height(cursor)
        return SeaCondition(temperature, wave_height=height) if height is not None else None
    return None


def colour_code(cursor: Cursor) -> Union[ColourCode, Unknown, None]:
    if cursor.slashes(3):
        return UNKNOWN
    code = cursor.one_of(COLOUR_CODES)
    return ColourCode(code) if code is not None else None


def remarks(cursor: Cursor) -> Optional[str]:
    """``RMK`` and the verbatim remark text that follows it.

    Once ``RMK`` has been read the rest of the report belongs to the remark,
    so a character outside the remark alphabet raises :class:`FieldShapeError`
    instead of leaving the group unmatched.
    """
    if not cursor.literal("RMK") or not cursor.at_boundary():
        return None
    if not cursor.literal(" "):
        return ""

    start = cursor.pos
    end = start
    text = cursor.text
    while end < len(text) and text[end] in REMARK_CHARS:
        end += 1
    if end < len(text) and text[end] != "=":
        raise FieldShapeError(text, end, "remarks", ("remark text",))

    body = text[start:end].rstrip(" ")
    cursor.pos = start + len(body)
    return body
