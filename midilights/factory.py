"""Factory that builds processing blocks, chains and patches."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from midilights.blocks import (
    OBJECT_TYPE_KEY,
    TYPE_NAME_PROCESSING_CHAIN,
    TYPE_NAME_SINGLE_COLOR_FILL,
    ProcessingBlock,
    SingleColorFill,
)
from midilights.chain import ProcessingChain
from midilights.json_helper import JsonHelper
from midilights.patch import Patch

BlockCreator = Callable[["ProcessingBlockFactory"], ProcessingBlock]


class ProcessingBlockFactory:
    """Creates processing blocks from their JSON form, plus chains and patches.

    The MIDI input, RGB function factory and time source are kept for creators
    of blocks that need them; such creators are added with ``register``.
    """

    def __init__(
        self,
        midi_input: Any = None,
        rgb_function_factory: Any = None,
        time: Any = None,
    ) -> None:
        self.midi_input = midi_input
        self.rgb_function_factory = rgb_function_factory
        self.time = time
        self._creators: dict[str, BlockCreator] = {
            TYPE_NAME_SINGLE_COLOR_FILL: lambda factory: SingleColorFill(),
            TYPE_NAME_PROCESSING_CHAIN: ProcessingChain,
        }

    def register(self, object_type: str, creator: BlockCreator) -> None:
        """Make blocks of the given object type buildable; creator gets this factory."""
        self._creators[object_type] = creator

    def create_processing_block(self, converted: Any) -> ProcessingBlock | None:
        """Build a block from JSON, or return None if its type is unknown or missing."""
        helper = JsonHelper("ProcessingBlockFactory.create_processing_block", converted)
        object_type = helper.get_str(OBJECT_TYPE_KEY)
        if object_type is None:
            return None
        creator = self._creators.get(object_type)
        if creator is None:
            return None
        block = creator(self)
        block.from_json(converted)
        return block

    def create_patch(self, converted: Any = None) -> Patch:
        """Build a patch, loading it from JSON when given."""
        patch = Patch(self)
        if converted is not None:
            patch.from_json(converted)
        return patch

    def create_processing_chain(self) -> ProcessingChain:
        """Build an empty processing chain."""
        return ProcessingChain(self)