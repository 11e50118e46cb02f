"""Tests for the atmospheric block and its component groups."""

import pytest

from metar_decoder.model.atmosphere import (
    CloudDensity,
    CloudLayer,
    CloudType,
    CompassSector,
    MetricVisibility,
    Phenomenon,
    RvrDistance,
    RvrModifier,
    RvrTrend,
    SkyCover,
    StatuteMileVisibility,
    WeatherIntensity,
)
from metar_decoder.model.markers import UNKNOWN
from metar_decoder.model.runway import Runway, RunwaySide
from metar_decoder.parser.atmosphere import (
    atmospheric_condition,
    cloud_direction,
    cloud_layer,
    compass_sector,
    directional_visibility,
    horizontal_visibility,
    present_weather,
    runway_visual_range,
    vertical_visibility,
)
from metar_decoder.parser.cursor import Cursor


@pytest.mark.parametrize(
    "text, expected",
    [
        ("////", UNKNOWN),
        ("9999", MetricVisibility(9999)),
        ("0800", MetricVisibility(800)),
        ("10SM", StatuteMileVisibility(whole=10)),
        ("1 1/2SM", StatuteMileVisibility(whole=1, numerator=1, denominator=2)),
        ("3/4SM", StatuteMileVisibility(numerator=3, denominator=4)),
        ("1/16SM", StatuteMileVisibility(numerator=1, denominator=16)),
    ],
)
def test_horizontal_visibility_shapes(text, expected):
    """Each lexical shape selects its own visibility variant."""
    cursor = Cursor(text)
    assert horizontal_visibility(cursor) == expected
    assert cursor.at_end()


def test_statute_miles_total():
    """Mixed numbers add their fraction to the whole part."""
    assert StatuteMileVisibility(whole=1, numerator=1, denominator=2).miles == 1.5
    assert StatuteMileVisibility(numerator=3, denominator=4).miles == 0.75


@pytest.mark.parametrize("text", ["22/18", "999", "1 1SM"])
def test_horizontal_visibility_rejects(text):
    """Temperatures and short digit runs are not visibility."""
    cursor = Cursor(text)
    assert horizontal_visibility(cursor) is None


def test_compass_sector_prefers_two_letters():
    """NE is not read as N."""
    assert compass_sector(Cursor("NE")) is CompassSector.NORTH_EAST
    assert compass_sector(Cursor("N")) is CompassSector.NORTH


def test_directional_visibility():
    """A visibility immediately followed by a sector."""
    entry = directional_visibility(Cursor("4000NE"))
    assert entry.visibility == MetricVisibility(4000)
    assert entry.sector is CompassSector.NORTH_EAST
    assert directional_visibility(Cursor("4000")) is None


def test_runway_visual_range_single():
    """Runway, distance, unit and trend."""
    rvr = runway_visual_range(Cursor("R04/0600FT"))
    assert rvr.runway == Runway(4)
    assert rvr.distance == RvrDistance(600)
    assert rvr.feet is True
    assert rvr.is_range is False


def test_runway_visual_range_with_range_and_trend():
    """min V max with modifiers on both ends."""
    rvr = runway_visual_range(Cursor("R09L/M0600VP1500FTU"))
    assert rvr.runway == Runway(9, RunwaySide.LEFT)
    assert rvr.distance == RvrDistance(600, RvrModifier.AT_MOST)
    assert rvr.max_distance == RvrDistance(1500, RvrModifier.AT_LEAST)
    assert rvr.trend is RvrTrend.INCREASING
    assert rvr.is_range is True


def test_runway_visual_range_rejects_runway_state():
    """A runway state group is not an RVR."""
    assert runway_visual_range(Cursor("R27/CLRD//")) is None


def test_present_weather():
    """Intensity prefix and a run of codes."""
    heavy = present_weather(Cursor("+TSRA"))
    assert heavy.intensity is WeatherIntensity.HEAVY
    assert heavy.codes == (Phenomenon.THUNDERSTORM, Phenomenon.RAIN)

    vicinity = present_weather(Cursor("VCSH"))
    assert vicinity.intensity is WeatherIntensity.IN_VICINITY
    assert vicinity.codes == (Phenomenon.SHOWERS,)

    assert present_weather(Cursor("//")) is UNKNOWN
    assert present_weather(Cursor("-")) is None


def test_vertical_visibility():
    """VV takes three digits or three slashes."""
    assert vertical_visibility(Cursor("VV002")) == 2
    assert vertical_visibility(Cursor("VV///")) is UNKNOWN
    assert vertical_visibility(Cursor("VV02")) is None


def test_cloud_layers():
    """Density, floor and optional type, each possibly unknown."""
    assert cloud_layer(Cursor("FEW030")) == CloudLayer(CloudDensity.FEW, 30)
    assert cloud_layer(Cursor("BKN008CB")) == CloudLayer(CloudDensity.BROKEN, 8, CloudType.CUMULONIMBUS)
    assert cloud_layer(Cursor("OVC001///")) == CloudLayer(CloudDensity.OVERCAST, 1, UNKNOWN)
    assert cloud_layer(Cursor("//////CB")) == CloudLayer(UNKNOWN, UNKNOWN, CloudType.CUMULONIMBUS)
    assert cloud_layer(Cursor("FEW30")) is None
    assert CloudLayer(CloudDensity.FEW, 30).floor_feet == 3000


def test_block_cavok_stands_alone():
    """CAVOK populates nothing else."""
    block = atmospheric_condition(Cursor(" CAVOK"))
    assert block.cavok is True
    assert block.visibility is None and block.clouds == ()


def test_block_sky_clear():
    """A lone SKC is its own alternative."""
    block = atmospheric_condition(Cursor(" SKC"))
    assert block.sky is SkyCover.SKY_CLEAR


def test_block_full_sequence():
    """Visibility, RVR, weather and several cloud layers."""
    cursor = Cursor(" 1000 R12/0800N R30/P1500D BR OVC001/// 09/09")
    block = atmospheric_condition(cursor)
    assert block.visibility == MetricVisibility(1000)
    assert [str(r.runway) for r in block.runway_visual_ranges] == ["12", "30"]
    assert block.runway_visual_ranges[1].trend is RvrTrend.DECREASING
    assert block.weather[0].codes == (Phenomenon.MIST,)
    assert block.clouds == (CloudLayer(CloudDensity.OVERCAST, 1, UNKNOWN),)
    assert cursor.peek(6) == " 09/09"


def test_block_vertical_visibility_ends_clouds():
    """After VV no cloud layers are read."""
    cursor = Cursor(" 0450 FG VV/// FEW010")
    block = atmospheric_condition(cursor)
    assert block.vertical_visibility is UNKNOWN
    assert block.clouds == ()
    assert cursor.peek(7) == " FEW010"


def test_block_no_cloud_marker():
    """NCD ends the block in place of cloud layers."""
    block = atmospheric_condition(Cursor(" 9999 // NCD"))
    assert block.weather == (UNKNOWN,)
    assert block.sky is SkyCover.NO_CLOUD_DETECTED


def test_block_directional_visibility():
    """Directional entries follow the prevailing visibility."""
    block = atmospheric_condition(Cursor(" 6000 2000SW 4000NE FEW010"))
    assert [d.sector for d in block.directional_visibility] == [
        CompassSector.SOUTH_WEST,
        CompassSector.NORTH_EAST,
    ]


def test_block_absent():
    """Nothing matched means no block."""
    cursor = Cursor(" 22/18 Q1013")
    assert atmospheric_condition(cursor) is None
    assert cursor.pos == 0


def test_cloud_direction():
    """A cloud type seen in several sectors."""
    entry = cloud_direction(Cursor("CB/NE/E"))
    assert entry.cloud_type is CloudType.CUMULONIMBUS
    assert entry.sectors == (CompassSector.NORTH_EAST, CompassSector.EAST)
    assert cloud_direction(Cursor("CB")) is None
