"""Trend forecasts appended to the observation (``NOSIG``, ``BECMG``, ``TEMPO``)."""
from __future__ import annotations

from typing import Optional

from metar_decoder.model.report import ChangeIndicator, ChangeTime, TrendForecast, TrendKind
from metar_decoder.parser.atmosphere import atmospheric_condition
from metar_decoder.parser.cursor import DIGITS, Cursor, keyword
from metar_decoder.parser.wind import wind, wind_variation

__all__ = ["change_time", "trend_forecast"]


def _trend_kind(cursor: Cursor) -> Optional[TrendKind]:
    kind = cursor.one_of(("BECMG", "TEMPO"))
    return TrendKind(kind) if kind is not None else None


def change_time(cursor: Cursor) -> Optional[ChangeTime]:
    """``FM1230``, ``TL1400`` or ``AT1500``."""
    indicator = cursor.one_of(("FM", "TL", "AT"))
    if indicator is None:
        return None
    hour = cursor.chars("01", DIGITS) or cursor.chars("2", "0123")
    if hour is None:
        return None
    minute = cursor.chars("012345", DIGITS)
    if minute is None:
        return None
    return ChangeTime(ChangeIndicator(indicator), int(hour), int(minute))


def trend_forecast(cursor: Cursor) -> Optional[TrendForecast]:
    """One trend group, including its leading separator.

    ``NOSIG`` is terminal. ``BECMG`` and ``TEMPO`` take any number of change
    times, an optional ``NSW``, an optional wind group and an atmospheric
    block.
    """
    if cursor.token(keyword("NOSIG"), "no significant change") is not None:
        return TrendForecast(TrendKind.NO_SIGNIFICANT_CHANGE)

    kind = cursor.token(_trend_kind, "trend")
    if kind is None:
        return None
    times = cursor.repeat(change_time, "change time")
    nsw = cursor.token(keyword("NSW"), "no significant weather") is not None

    trend_wind = cursor.token(wind, "wind")
    variation = None
    if trend_wind is not None:
        variation = cursor.token(wind_variation, "wind variation")

    conditions = cursor.attempt(atmospheric_condition, "atmospheric conditions")
    if not nsw:
        nsw = cursor.token(keyword("NSW"), "no significant weather") is not None

    return TrendForecast(
        kind=kind,
        change_times=times,
        no_significant_weather=nsw,
        wind=trend_wind,
        wind_variation=variation,
        conditions=conditions,
    )
