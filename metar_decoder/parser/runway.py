"""Runway designators, windshear groups and runway state groups.

Windshear and runway state entries can both start with ``R`` and a runway
number. A bare windshear entry is therefore only accepted when it is not
followed by ``/`` and an alphanumeric character, which would make it the
start of a runway state group (``WS R09 R27/CLRD//``).
"""
from __future__ import annotations

from typing import Optional, Tuple, Union

from metar_decoder.model.markers import ALL_RUNWAYS, UNKNOWN, Unknown
from metar_decoder.model.runway import Runway, RunwaySide, RunwayState, Windshear
from metar_decoder.parser.cursor import ALNUM, DIGITS, Cursor, keyword

__all__ = ["runway_designator", "windshear", "runway_state"]


def runway_designator(cursor: Cursor) -> Optional[Runway]:
    """Runway number 01-36 (the shape admits 00) with an optional L/C/R side."""
    number = cursor.chars("012", DIGITS) or cursor.chars("3", "0123456")
    if number is None:
        return None
    side = cursor.one_of(("L", "C", "R"))
    return Runway(int(number), RunwaySide(side) if side else None)


# ---------------------------------------------------------------------------
# Windshear
# ---------------------------------------------------------------------------


def _runway_state_continuation(cursor: Cursor) -> Optional[bool]:
    return True if cursor.literal("/") and cursor.chars(ALNUM) else None


def _windshear_runway(cursor: Cursor) -> Optional[Windshear]:
    if cursor.literal("TKOF RWY"):
        runway = runway_designator(cursor)
        return Windshear(runway, takeoff=True) if runway is not None else None

    if not (cursor.literal("RWY") or cursor.literal("R")):
        return None
    runway = runway_designator(cursor)
    if runway is None or cursor.followed_by(_runway_state_continuation):
        return None
    return Windshear(runway)


def windshear(cursor: Cursor) -> Optional[Tuple[Windshear, ...]]:
    """``WS ALL RWY`` or ``WS`` followed by one or more runway entries."""
    if cursor.token(keyword("WS"), "windshear") is None:
        return None
    if cursor.token(keyword("ALL RWY"), "windshear all runways") is not None:
        return (Windshear(ALL_RUNWAYS),)
    entries = cursor.repeat(_windshear_runway, "windshear runway")
    return entries or None


# ---------------------------------------------------------------------------
# Runway state
# ---------------------------------------------------------------------------


def _coded(cursor: Cursor, width: int, *classes: str) -> Union[int, Unknown, None]:
    if cursor.slashes(width):
        return UNKNOWN
    digits = cursor.chars(*classes)
    return int(digits) if digits is not None else None


def _braking_action(cursor: Cursor) -> Union[int, Unknown, None]:
    if cursor.slashes(2):
        return UNKNOWN
    digits = cursor.chars("12345678", DIGITS) or cursor.chars("9", "123459")
    return int(digits) if digits is not None else None


def runway_state(cursor: Cursor) -> Optional[RunwayState]:
    if not cursor.literal("R"):
        return None
    runway = ALL_RUNWAYS if cursor.literal("88") else runway_designator(cursor)
    if runway is None or not cursor.literal("/"):
        return None

    if cursor.literal("CLRD"):
        braking = _braking_action(cursor)
        if braking is None:
            return None
        return RunwayState(runway, braking=braking, cleared=True)

    deposit = _coded(cursor, 1, DIGITS)
    if deposit is None:
        return None
    extent = _coded(cursor, 1, "1259")
    if extent is None:
        return None
    depth = _coded(cursor, 2, DIGITS, DIGITS)
    if depth is None:
        return None
    braking = _braking_action(cursor)
    if braking is None:
        return None
    return RunwayState(runway, braking=braking, deposit=deposit, extent=extent, depth=depth)
