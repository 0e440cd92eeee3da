"""Colour values, note states and note-to-light map conversion."""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_CHANNEL_MAX = 0xFF
_NOTE_MAX = 0xFF


def _check_channel(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"colour channel {name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= _CHANNEL_MAX:
        raise ValueError(f"colour channel {name} out of range 0..255: {value}")


@dataclass(frozen=True)
class Rgb:
    """A single 8-bit-per-channel RGB colour with saturating arithmetic."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        _check_channel("r", self.r)
        _check_channel("g", self.g)
        _check_channel("b", self.b)

    def __add__(self, other: Rgb) -> Rgb:
        if not isinstance(other, Rgb):
            return NotImplemented
        return Rgb(
            min(self.r + other.r, _CHANNEL_MAX),
            min(self.g + other.g, _CHANNEL_MAX),
            min(self.b + other.b, _CHANNEL_MAX),
        )

    def __sub__(self, other: Rgb) -> Rgb:
        if not isinstance(other, Rgb):
            return NotImplemented
        return Rgb(
            max(self.r - other.r, 0),
            max(self.g - other.g, 0),
            max(self.b - other.b, 0),
        )

    def __mul__(self, other: Any) -> Rgb:
        """Scale by a number, or by another colour where 255 means 100 %."""
        if isinstance(other, Rgb):
            return rgb_from_float(
                other.r / 255.0 * self.r,
                other.g / 255.0 * self.g,
                other.b / 255.0 * self.b,
            )
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return rgb_from_float(other * self.r, other * self.g, other * self.b)
        return NotImplemented

    def __rmul__(self, factor: Any) -> Rgb:
        if isinstance(factor, numbers.Real) and not isinstance(factor, bool):
            return self.__mul__(factor)
        return NotImplemented

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


def rgb_from_float(r: float, g: float, b: float) -> Rgb:
    """Build a colour from float channels, clamping to 0..255 and truncating."""

    def clamp(value: float) -> int:
        return int(min(max(value, 0.0), float(_CHANNEL_MAX)))

    return Rgb(clamp(r), clamp(g), clamp(b))


OFF = Rgb()
RED = Rgb(0xFF, 0x00, 0x00)
GREEN = Rgb(0x00, 0xFF, 0x00)
BLUE = Rgb(0x00, 0x00, 0xFF)
YELLOW = Rgb(0xFF, 0xFF, 0x00)
MAGENTA = Rgb(0xFF, 0x00, 0xFF)
CYAN = Rgb(0x00, 0xFF, 0xFF)
WHITE = Rgb(0xFF, 0xFF, 0xFF)


@dataclass(frozen=True)
class LinearConstants:
    """Factor and offset of a linear function."""

    factor: float
    offset: float


@dataclass
class NoteState:
    """State of a single note."""

    pressed: bool = False
    sounding: bool = False
    press_down_velocity: int = 0
    note_on_time_stamp: int = 0
    press_down_color: Rgb = field(default_factory=Rgb)


def note_map_to_json(mapping: Mapping[int, int]) -> dict[str, int]:
    """Convert a note-number to light-number map to a JSON object."""
    return {str(note): light for note, light in sorted(mapping.items())}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def note_map_from_json(data: Any) -> dict[int, int]:
    """Read a note-to-light map from a JSON object.

    Only note numbers 0..255 are read. Entries that are not numbers are
    skipped; light numbers are stored as 8-bit values.
    """
    if not isinstance(data, Mapping):
        return {}
    converted: dict[int, int] = {}
    for note in range(_NOTE_MAX + 1):
        value = data.get(str(note))
        if _is_number(value):
            converted[note] = int(value) & 0xFF
    return converted