"""Colour pickers that hand out colours one at a time."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod

from midilights.colors import BLUE, CYAN, GREEN, MAGENTA, RED, YELLOW, Rgb


class ColorPicker(ABC):
    """Something that picks a colour each time it is asked."""

    @abstractmethod
    def pick(self) -> Rgb:
        """Return the next colour."""


class SequentialColorPicker(ColorPicker):
    """Cycles through a fixed sequence of primary and secondary colours."""

    SEQUENCE: tuple[Rgb, ...] = (RED, GREEN, BLUE, YELLOW, MAGENTA, CYAN)

    def __init__(self) -> None:
        self._colors = itertools.cycle(self.SEQUENCE)

    def pick(self) -> Rgb:
        return next(self._colors)