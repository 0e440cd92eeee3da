"""Patches: a named processing chain with an optional bank and program number."""

from __future__ import annotations

import threading
from collections.abc import Mapping, MutableSequence
from typing import Any, Protocol

from midilights.blocks import OBJECT_TYPE_KEY
from midilights.chain import ProcessingChain
from midilights.colors import Rgb
from midilights.json_helper import JsonHelper

TYPE_NAME_PATCH = "Patch"
DEFAULT_NAME = "Untitled Patch"

_HAS_BANK_AND_PROGRAM_KEY = "hasBankAndProgram"
_BANK_KEY = "bank"
_PROGRAM_KEY = "program"
_NAME_KEY = "name"
_CHAIN_KEY = "processingChain"


class ChainFactory(Protocol):
    """Anything that can build an empty processing chain."""

    def create_processing_chain(self) -> ProcessingChain:
        ...


def _check_byte(name: str, value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} out of range 0..255: {value}")
    return value


class Patch:
    """Configuration of a processing chain, like a synthesizer patch.

    It determines how light is generated from MIDI data.
    """

    object_type = TYPE_NAME_PATCH

    def __init__(self, factory: ChainFactory) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._has_bank_and_program = False
        self._bank = 0
        self._program = 0
        self._name = DEFAULT_NAME
        self._chain = factory.create_processing_chain()

    @property
    def processing_chain(self) -> ProcessingChain:
        """The processing chain of this patch."""
        return self._chain

    @property
    def has_bank_and_program(self) -> bool:
        """True if the patch has a valid bank and program number."""
        with self._lock:
            return self._has_bank_and_program

    @property
    def bank(self) -> int:
        with self._lock:
            return self._bank

    @bank.setter
    def bank(self, value: int) -> None:
        value = _check_byte("bank", value)
        with self._lock:
            self._bank = value

    @property
    def program(self) -> int:
        with self._lock:
            return self._program

    @program.setter
    def program(self, value: int) -> None:
        """Set the program number; this marks bank and program as valid."""
        value = _check_byte("program", value)
        with self._lock:
            self._program = value
            self._has_bank_and_program = True

    @property
    def name(self) -> str:
        with self._lock:
            return self._name

    @name.setter
    def name(self, value: str) -> None:
        with self._lock:
            self._name = str(value)

    def clear_bank_and_program(self) -> None:
        """Mark the bank and program number as not set."""
        with self._lock:
            self._has_bank_and_program = False

    def activate(self) -> None:
        """Make the patch respond to events."""
        self._chain.activate()

    def deactivate(self) -> None:
        """Make the patch ignore events and return to a clean state."""
        self._chain.deactivate()

    def execute(
        self, strip: MutableSequence[Rgb], note_to_light_map: Mapping[int, int]
    ) -> None:
        """Render this patch onto the strip in place."""
        self._chain.execute(strip, note_to_light_map)

    def to_json(self) -> dict[str, Any]:
        with self._lock:
            return {
                OBJECT_TYPE_KEY: self.object_type,
                _HAS_BANK_AND_PROGRAM_KEY: self._has_bank_and_program,
                _BANK_KEY: self._bank,
                _PROGRAM_KEY: self._program,
                _NAME_KEY: self._name,
                _CHAIN_KEY: self._chain.to_json(),
            }

    def from_json(self, converted: Any) -> None:
        with self._lock:
            helper = JsonHelper("Patch.from_json", converted)

            flag = helper.get_bool(_HAS_BANK_AND_PROGRAM_KEY)
            if flag is not None:
                self._has_bank_and_program = flag
            program = helper.get_int(_PROGRAM_KEY)
            if program is not None:
                self._program = program & 0xFF
            bank = helper.get_int(_BANK_KEY)
            if bank is not None:
                self._bank = bank & 0xFF
            name = helper.get_str(_NAME_KEY)
            if name is not None:
                self._name = name

            chain_json = helper.get_object(_CHAIN_KEY)
            if chain_json is not None:
                self._chain.from_json(chain_json)
            else:
                self._chain = self._factory.create_processing_chain()