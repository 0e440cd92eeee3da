import pytest

from midilights.blocks import Mode, SingleColorFill
from midilights.colors import Rgb


@pytest.fixture
def source():
    return SingleColorFill()


@pytest.mark.parametrize("color", [Rgb(0, 0, 0), Rgb(255, 255, 255), Rgb(1, 2, 3)])
def test_execute_different_colors(source, color):
    strip = [Rgb()] * 20
    source.color = color
    source.execute(strip, {})
    assert len(strip) == 20
    assert all(led == color for led in strip)


def test_execute_overwrites_existing_values(source):
    strip = [Rgb(9, 9, 9), Rgb(1, 1, 1)]
    source.color = Rgb(4, 5, 6)
    source.execute(strip, {})
    assert strip == [Rgb(4, 5, 6), Rgb(4, 5, 6)]


def test_from_json(source):
    source.from_json({"objectType": "SingleColorFill", "r": 10, "g": 20, "b": 30})
    assert source.color == Rgb(10, 20, 30)


def test_from_json_with_wrong_type(source):
    source.from_json({"objectType": "wrong", "r": 10, "g": 20, "b": 30})
    assert source.color == Rgb(10, 20, 30)


def test_from_json_with_missing_color(source):
    source.from_json({"objectType": "SingleColorFill", "r": 10, "b": 30})
    assert source.color == Rgb(10, 0, 30)


def test_from_json_keeps_previous_value_for_missing_channel(source):
    source.color = Rgb(7, 8, 9)
    source.from_json({"r": 1})
    assert source.color == Rgb(1, 8, 9)


def test_from_json_ignores_non_number(source):
    source.from_json({"r": "red", "g": 2, "b": 3})
    assert source.color == Rgb(0, 2, 3)


def test_to_json(source):
    source.color = Rgb(40, 50, 60)
    j = source.to_json()
    assert len(j) == 4
    assert j["objectType"] == "SingleColorFill"
    assert j["r"] == 40
    assert j["g"] == 50
    assert j["b"] == 60


def test_json_round_trip(source):
    source.color = Rgb(11, 22, 33)
    other = SingleColorFill()
    other.from_json(source.to_json())
    assert other.color == Rgb(11, 22, 33)


def test_default_mode_is_additive(source):
    assert source.mode() is Mode.ADDITIVE


def test_activate_and_deactivate_keep_color(source):
    source.color = Rgb(1, 2, 3)
    source.activate()
    source.deactivate()
    strip = [Rgb()]
    source.execute(strip, {})
    assert strip == [Rgb(1, 2, 3)]