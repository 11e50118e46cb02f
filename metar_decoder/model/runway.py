"""Runway designators and the runway-bound groups (windshear, runway state)."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from metar_decoder.model.markers import AllRunways, Unknown

__all__ = ["RunwaySide", "Runway", "Windshear", "RunwayState"]


class RunwaySide(str, Enum):
    LEFT = "L"
    CENTRE = "C"
    RIGHT = "R"


@dataclass(frozen=True)
class Runway:
    """Runway number 01-36 with an optional parallel-runway side."""

    number: int
    side: Optional[RunwaySide] = None

    def __str__(self) -> str:
        return f"{self.number:02d}{self.side.value if self.side else ''}"


@dataclass(frozen=True)
class Windshear:
    """A windshear report for one runway, or for all runways (``WS ALL RWY``)."""

    runway: Union[Runway, AllRunways]
    takeoff: bool = False


@dataclass(frozen=True)
class RunwayState:
    """Surface state of a runway.

    Either ``cleared`` is set (``CLRD``) or the deposit triple is present:
    ``deposit`` type 0-9, ``extent`` code (1, 2, 5 or 9) and ``depth`` in the
    coded two-digit form. ``braking`` is the friction/braking-action code
    (10-89, 91-95 or 99). Any of them may be ``UNKNOWN``.
    """

    runway: Union[Runway, AllRunways]
    braking: Union[int, Unknown]
    cleared: bool = False
    deposit: Union[int, Unknown, None] = None
    extent: Union[int, Unknown, None] = None
    depth: Union[int, Unknown, None] = None
