"""Convert decoded reports to plain JSON-compatible structures."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from metar_decoder.model.report import Report

__all__ = ["to_plain", "report_to_dict"]


def to_plain(value: Any) -> Any:
    """Recursively turn dataclasses, enums and tuples into dicts, strings and lists.

    Sentinels keep their coded spelling: ``UNKNOWN`` becomes ``"unknown"``,
    ``VARIABLE`` becomes ``"VRB"`` and ``ALL_RUNWAYS`` becomes ``"all"``.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {field.name: to_plain(getattr(value, field.name)) for field in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (tuple, list)):
        return [to_plain(item) for item in value]
    return value


def report_to_dict(report: Report) -> dict[str, Any]:
    return to_plain(report)
