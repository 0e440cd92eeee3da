import pytest

from midilights.color_picker import ColorPicker, SequentialColorPicker
from midilights.colors import BLUE, CYAN, GREEN, MAGENTA, RED, YELLOW


def test_picks_in_sequence():
    picker = SequentialColorPicker()
    picks = [picker.pick() for _ in range(6)]
    assert picks == [RED, GREEN, BLUE, YELLOW, MAGENTA, CYAN]


def test_wraps_around():
    picker = SequentialColorPicker()
    first_round = [picker.pick() for _ in range(6)]
    second_round = [picker.pick() for _ in range(6)]
    assert second_round == first_round


def test_instances_are_independent():
    first = SequentialColorPicker()
    second = SequentialColorPicker()
    first.pick()
    first.pick()
    assert second.pick() == RED
    assert first.pick() == BLUE


def test_abstract_picker_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ColorPicker()