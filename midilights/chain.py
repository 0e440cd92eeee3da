"""A chain of processing blocks executed in series."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping, MutableSequence
from typing import Any, Protocol

from midilights.blocks import (
    OBJECT_TYPE_KEY,
    TYPE_NAME_PROCESSING_CHAIN,
    Mode,
    ProcessingBlock,
)
from midilights.colors import OFF, Rgb
from midilights.json_helper import JsonHelper

_log = logging.getLogger(__name__)

_CHAIN_KEY = "processingChain"


class BlockFactory(Protocol):
    """Anything that can build a processing block from its JSON form."""

    def create_processing_block(self, converted: Any) -> ProcessingBlock | None:
        ...


class ProcessingChain(ProcessingBlock):
    """Holds processing blocks and runs them one after another."""

    object_type = TYPE_NAME_PROCESSING_CHAIN

    def __init__(self, factory: BlockFactory) -> None:
        self._factory = factory
        self._lock = threading.RLock()
        self._active = False
        self._blocks: list[ProcessingBlock] = []

    @property
    def blocks(self) -> tuple[ProcessingBlock, ...]:
        """The blocks in execution order."""
        with self._lock:
            return tuple(self._blocks)

    def insert_block(self, block: ProcessingBlock, index: int | None = None) -> None:
        """Insert a block at the index, or at the end when index is None or too large."""
        with self._lock:
            if index is None or index > len(self._blocks):
                index = len(self._blocks)
            self._blocks.insert(index, block)
            if self._active:
                block.activate()
            else:
                block.deactivate()

    def activate(self) -> None:
        with self._lock:
            for block in self._blocks:
                block.activate()
            self._active = True

    def deactivate(self) -> None:
        with self._lock:
            for block in self._blocks:
                block.deactivate()
            self._active = False

    def execute(
        self, strip: MutableSequence[Rgb], note_to_light_map: Mapping[int, int]
    ) -> None:
        with self._lock:
            strip[:] = [OFF] * len(strip)
            for block in self._blocks:
                mode = block.mode()
                if mode is Mode.ADDITIVE:
                    intermediate = [OFF] * len(strip)
                    block.execute(intermediate, note_to_light_map)
                    strip[:] = [a + b for a, b in zip(strip, intermediate)]
                elif mode is Mode.OVERWRITING:
                    block.execute(strip, note_to_light_map)

    def to_json(self) -> dict[str, Any]:
        with self._lock:
            return {
                OBJECT_TYPE_KEY: self.object_type,
                _CHAIN_KEY: [block.to_json() for block in self._blocks],
            }

    def from_json(self, converted: Any) -> None:
        with self._lock:
            self._blocks.clear()
            helper = JsonHelper("ProcessingChain.from_json", converted)
            items = helper.get_array(_CHAIN_KEY)
            if items is None:
                _log.error(
                    "from_json: JSON does not contain list of processing blocks. "
                    "Chain will stay empty."
                )
            else:
                for item in items:
                    block = self._factory.create_processing_block(item)
                    if block is None:
                        _log.error("from_json: could not create block from %r", item)
                        continue
                    self._blocks.append(block)
            for block in self._blocks:
                if self._active:
                    block.activate()
                else:
                    block.deactivate()