"""Processing blocks that render colours onto an LED strip."""

from __future__ import annotations

import dataclasses
import enum
from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableSequence
from typing import Any

from midilights.colors import Rgb
from midilights.json_helper import JsonHelper

OBJECT_TYPE_KEY = "objectType"

TYPE_NAME_SINGLE_COLOR_FILL = "SingleColorFill"
TYPE_NAME_NOTE_VISUALIZER = "NoteVisualizer"
TYPE_NAME_PROCESSING_CHAIN = "ProcessingChain"


class Mode(enum.Enum):
    """How a block's output is combined with the strip it runs on."""

    ADDITIVE = "additive"
    OVERWRITING = "overwriting"


class ProcessingBlock(ABC):
    """A step that writes colours onto a strip, convertible to and from JSON."""

    object_type: str = ""

    def activate(self) -> None:
        """Start responding to events."""

    def deactivate(self) -> None:
        """Stop responding to events."""

    @abstractmethod
    def execute(
        self, strip: MutableSequence[Rgb], note_to_light_map: Mapping[int, int]
    ) -> None:
        """Render onto the strip in place."""

    def mode(self) -> Mode:
        """Return how the output of this block is combined; additive by default."""
        return Mode.ADDITIVE

    @abstractmethod
    def to_json(self) -> dict[str, Any]:
        """Return the block's configuration as a JSON object."""

    @abstractmethod
    def from_json(self, converted: Any) -> None:
        """Load the block's configuration from a JSON object."""


class SingleColorFill(ProcessingBlock):
    """Fills the whole strip with one colour."""

    object_type = TYPE_NAME_SINGLE_COLOR_FILL

    def __init__(self, color: Rgb | None = None) -> None:
        self.color = color if color is not None else Rgb()

    def execute(
        self, strip: MutableSequence[Rgb], note_to_light_map: Mapping[int, int]
    ) -> None:
        color = self.color
        strip[:] = [color] * len(strip)

    def to_json(self) -> dict[str, Any]:
        color = self.color
        return {
            OBJECT_TYPE_KEY: self.object_type,
            "r": color.r,
            "g": color.g,
            "b": color.b,
        }

    def from_json(self, converted: Any) -> None:
        helper = JsonHelper("SingleColorFill.from_json", converted)
        changes: dict[str, int] = {}
        for channel in ("r", "g", "b"):
            value = helper.get_int(channel)
            if value is not None:
                changes[channel] = value & 0xFF
        self.color = dataclasses.replace(self.color, **changes)