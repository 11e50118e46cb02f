"""Flatten decoded reports into one tabular row per report."""
from __future__ import annotations

from typing import Any, Iterable, Optional

import pandas as pd

from metar_decoder.model.atmosphere import MetricVisibility, StatuteMileVisibility
from metar_decoder.model.markers import UNKNOWN
from metar_decoder.model.report import Report

__all__ = ["COLUMNS", "report_to_record", "reports_to_frame"]

COLUMNS = [
    "station",
    "day",
    "hour",
    "minute",
    "report_type",
    "auto",
    "corrected",
    "wind_dir_deg",
    "wind_variable",
    "wind_speed",
    "wind_gust",
    "wind_unit",
    "cavok",
    "visibility_m",
    "visibility_sm",
    "weather",
    "ceiling_ft",
    "vertical_visibility_ft",
    "temp_c",
    "dewpoint_c",
    "pressure_kind",
    "pressure_value",
    "sea_temp_c",
    "trend_count",
    "remarks",
]

_CEILING_DENSITIES = {"BKN", "OVC"}


def _known(value: Any) -> Optional[Any]:
    return None if value is UNKNOWN else value


def report_to_record(report: Report) -> dict[str, Any]:
    """One flat record; unknown and absent values both become ``None``."""
    record: dict[str, Any] = dict.fromkeys(COLUMNS)
    record.update(
        station=report.station,
        day=report.time.day,
        hour=report.time.hour,
        minute=report.time.minute,
        report_type=report.report_type.value if report.report_type else None,
        auto=report.auto,
        corrected=report.corrected,
        cavok=False,
        trend_count=len(report.trends),
        remarks=report.remarks,
    )

    wind = report.wind
    if wind is not None:
        record["wind_dir_deg"] = wind.direction if isinstance(wind.direction, int) else None
        record["wind_variable"] = wind.direction is not UNKNOWN and not isinstance(wind.direction, int)
        speed = _known(wind.speed)
        record["wind_speed"] = speed.value if speed is not None else None
        record["wind_gust"] = wind.gust
        record["wind_unit"] = wind.unit.value

    atmospheric = report.atmospheric
    if atmospheric is not None:
        record["cavok"] = atmospheric.cavok
        visibility = atmospheric.visibility
        if isinstance(visibility, MetricVisibility):
            record["visibility_m"] = visibility.metres
        elif isinstance(visibility, StatuteMileVisibility):
            record["visibility_sm"] = visibility.miles
        codes = [
            (w.intensity.value if w.intensity else "") + "".join(c.value for c in w.codes)
            for w in atmospheric.weather
            if w is not UNKNOWN
        ]
        record["weather"] = " ".join(codes) or None
        ceilings = [
            layer.floor_feet
            for layer in atmospheric.clouds
            if layer.density is not UNKNOWN
            and layer.density.value in _CEILING_DENSITIES
            and layer.floor_feet is not None
        ]
        record["ceiling_ft"] = min(ceilings) if ceilings else None
        vertical = _known(atmospheric.vertical_visibility)
        record["vertical_visibility_ft"] = vertical * 100 if vertical is not None else None

    if report.temperature is not None:
        record["temp_c"] = _known(report.temperature.temperature)
        record["dewpoint_c"] = _known(report.temperature.dewpoint)

    if report.pressure is not None:
        record["pressure_kind"] = report.pressure.kind.value
        record["pressure_value"] = _known(report.pressure.value)

    if report.sea_condition is not None:
        record["sea_temp_c"] = _known(report.sea_condition.temperature)

    return record


def reports_to_frame(reports: Iterable[Report]) -> pd.DataFrame:
    """Build a DataFrame with one row per report and the :data:`COLUMNS` layout."""
    return pd.DataFrame([report_to_record(r) for r in reports], columns=COLUMNS)
