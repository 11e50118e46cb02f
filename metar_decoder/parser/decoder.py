"""Decode a complete report string into a :class:`Report`.

The sequencer walks the report groups in their fixed order. Station and
observation time are required; every other group is optional or repeated and
is skipped without consuming input when it does not match. Once every group
has been attempted only an optional ``=`` end marker and spaces may remain.
"""
from __future__ import annotations

import logging
from itertools import chain
from typing import Optional

from metar_decoder.errors import StructuralError, UnexpectedTrailingInput
from metar_decoder.model.report import Report
from metar_decoder.parser.atmosphere import atmospheric_condition, cloud_direction
from metar_decoder.parser.cursor import Cursor
from metar_decoder.parser.fields import (
    colour_code,
    correction_flag,
    observation_time,
    pressure,
    recent_weather,
    remarks,
    report_type,
    sea_condition,
    station,
    temperature_dewpoint,
)
from metar_decoder.parser.runway import runway_state, windshear
from metar_decoder.parser.trend import trend_forecast
from metar_decoder.parser.wind import wind, wind_variation

__all__ = ["decode"]

logger = logging.getLogger(__name__)


def _skip_spaces(cursor: Cursor) -> None:
    while cursor.literal(" "):
        pass


def _leading_flag(cursor: Cursor) -> Optional[str]:
    flag = correction_flag(cursor)
    if flag is None or not cursor.literal(" "):
        return None
    return flag


def decode(raw_text: str) -> Report:
    """Decode ``raw_text`` or raise a :class:`~metar_decoder.errors.ParseError`.

    Examples
    --------
    >>> decode("KXYZ 151854Z 00000KT CAVOK").atmospheric.cavok
    True
    """
    cursor = Cursor(raw_text)
    kind = cursor.attempt(report_type, "report type")

    start = cursor.pos
    leading = cursor.attempt(_leading_flag, "correction flag")
    code = cursor.attempt(station, "station")
    if code is None and leading is not None:
        # A station literally named AUTO, COR or CCA.
        cursor.pos = start
        leading = None
        code = cursor.attempt(station, "station")
    if code is None:
        logger.debug("No station in %r at offset %d", raw_text, start)
        raise StructuralError(raw_text, start, "station", cursor.expected_at(start))

    start = cursor.pos
    time = cursor.token(observation_time, "observation time")
    if time is None:
        offset = start + 1 if cursor.peek() == " " else start
        logger.debug("No observation time in %r at offset %d", raw_text, offset)
        raise StructuralError(raw_text, offset, "observation time", cursor.expected_at(start))

    flags = set(cursor.repeat(correction_flag, "correction flag"))
    if leading is not None:
        flags.add(leading)
    corrected = not flags.isdisjoint(("COR", "CCA"))
    auto = "AUTO" in flags

    report_wind = cursor.token(wind, "wind")
    variation = None
    if report_wind is not None:
        variation = cursor.token(wind_variation, "wind variation")

    atmospheric = cursor.attempt(atmospheric_condition, "atmospheric conditions")
    temperature = cursor.token(temperature_dewpoint, "temperature")
    report_pressure = cursor.token(pressure, "pressure")
    recent = cursor.repeat(recent_weather, "recent weather")
    colour = cursor.token(colour_code, "colour code")
    shear = tuple(chain.from_iterable(cursor.repeat(windshear, "windshear", spaced=False)))
    states = cursor.repeat(runway_state, "runway state")
    sea = cursor.token(sea_condition, "sea condition")
    trends = cursor.repeat(trend_forecast, "trend", spaced=False)
    directions = cursor.repeat(cloud_direction, "cloud direction")
    remark = cursor.token(remarks, "remarks")

    last = cursor.pos
    _skip_spaces(cursor)
    cursor.literal("=")
    _skip_spaces(cursor)
    if not cursor.at_end():
        logger.debug("Trailing input in %r at offset %d", raw_text, cursor.pos)
        raise UnexpectedTrailingInput(raw_text, cursor.pos, "end of report", cursor.expected_at(last))

    report = Report(
        station=code,
        time=time,
        report_type=kind,
        corrected=corrected,
        auto=auto,
        wind=report_wind,
        wind_variation=variation,
        atmospheric=atmospheric,
        temperature=temperature,
        pressure=report_pressure,
        recent_weather=recent,
        colour_code=colour,
        windshear=shear,
        runway_states=states,
        sea_condition=sea,
        trends=trends,
        cloud_directions=directions,
        remarks=remark,
    )
    logger.debug("Decoded %s report issued %s", code, time)
    return report
