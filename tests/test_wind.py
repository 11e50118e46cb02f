"""Tests for the wind and wind variation groups."""

import pytest

from metar_decoder.model.markers import UNKNOWN, VARIABLE
from metar_decoder.model.wind import WindSpeed, WindUnit
from metar_decoder.parser.cursor import Cursor
from metar_decoder.parser.wind import wind, wind_direction, wind_variation


def test_plain_wind():
    """Direction, speed and unit with no gust."""
    decoded = wind(Cursor("18012KT"))
    assert decoded.direction == 180
    assert decoded.speed == WindSpeed(12)
    assert decoded.gust is None
    assert decoded.unit is WindUnit.KNOTS


def test_gusting_wind_in_mps():
    """Gusts are exactly two digits after G."""
    decoded = wind(Cursor("27015G25MPS"))
    assert decoded.gust == 25
    assert decoded.unit is WindUnit.METRES_PER_SECOND


def test_variable_and_unknown_wind():
    """VRB and slashes decode to their sentinels."""
    assert wind(Cursor("VRB03KT")).direction is VARIABLE
    unknown = wind(Cursor("/////KT"))
    assert unknown.direction is UNKNOWN
    assert unknown.speed is UNKNOWN


def test_above_range_speed():
    """P marks a speed above the reportable range; speeds may have three digits."""
    decoded = wind(Cursor("270P120KPH"))
    assert decoded.speed == WindSpeed(120, at_least=True)
    assert decoded.unit is WindUnit.KILOMETRES_PER_HOUR


@pytest.mark.parametrize("text", ["18012", "1801KT", "18012G5KT", "37012KT", "18012KMH"])
def test_malformed_wind(text):
    """Malformed wind groups do not match."""
    assert wind(Cursor(text)) is None


def test_direction_shape_admits_up_to_369():
    """The direction shape is permissive above 360 but stops at 369."""
    assert wind_direction(Cursor("369")) == 369
    assert wind_direction(Cursor("000")) == 0
    assert wind_direction(Cursor("370")) is None


def test_wind_variation():
    """Variation is two directions joined by V."""
    variation = wind_variation(Cursor("240V300"))
    assert (variation.from_direction, variation.to_direction) == (240, 300)
    assert wind_variation(Cursor("240300")) is None
    assert wind_variation(Cursor("240V3")) is None
