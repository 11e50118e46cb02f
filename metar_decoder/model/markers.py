"""Sentinel markers shared by the report data model.

A field that never appeared in the report is ``None``. A field that appeared
using its missing-data spelling (a run of slashes) is :data:`UNKNOWN`.
"""
from __future__ import annotations

from enum import Enum
from typing import Final

__all__ = ["UNKNOWN", "VARIABLE", "ALL_RUNWAYS", "Unknown", "Variable", "AllRunways"]


class Unknown(Enum):
    """Value was reported with its missing-data spelling."""

    UNKNOWN = "unknown"

    def __repr__(self) -> str:
        return "UNKNOWN"


class Variable(Enum):
    """Wind direction reported as ``VRB``."""

    VARIABLE = "VRB"

    def __repr__(self) -> str:
        return "VARIABLE"


class AllRunways(Enum):
    """Entry applies to every runway of the aerodrome."""

    ALL_RUNWAYS = "all"

    def __repr__(self) -> str:
        return "ALL_RUNWAYS"


UNKNOWN: Final = Unknown.UNKNOWN
VARIABLE: Final = Variable.VARIABLE
ALL_RUNWAYS: Final = AllRunways.ALL_RUNWAYS
