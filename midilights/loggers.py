"""Loggers for strip updates, incoming MIDI messages and plain text output."""

from __future__ import annotations

import enum
import logging
import sys
import threading
from collections.abc import Sequence
from typing import Any, TextIO

from midilights.colors import Rgb

_strip_log = logging.getLogger(f"{__name__}.StripChangeLogger")
_midi_log = logging.getLogger(f"{__name__}.MidiMessageLogger")


class LogLevel(enum.IntEnum):
    """Severity of a log message."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class _Subscription:
    """Subscribes to a source on creation and unsubscribes when stopped."""

    def __init__(self, source: Any) -> None:
        self._source = source
        self._closed = False
        source.subscribe(self)

    def _stop(self) -> None:
        if not self._closed:
            self._closed = True
            self._source.unsubscribe(self)

    def close(self) -> None:
        self._stop()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class StripChangeLogger(_Subscription):
    """Logs every strip update that differs from the previous one."""

    def __init__(self, concert: Any) -> None:
        self._lock = threading.Lock()
        self._previous: list[Rgb] = []
        super().__init__(concert)

    def on_strip_update(self, strip: Sequence[Rgb]) -> str | None:
        """Log the strip if it changed; return the logged message, or None."""
        with self._lock:
            current = list(strip)
            if current == self._previous:
                return None
            self._previous = current

        lines = "".join(
            f"{number:3d}: {led.r:3d} {led.g:3d} {led.b:3d}\r\n"
            for number, led in enumerate(current)
        )
        message = "Strip update:\r\n" + lines
        _strip_log.debug("%s", message)
        return message

    def close(self) -> None:
        """Stop observing the concert."""
        self._stop()


class MidiMessageLogger(_Subscription):
    """Logs a description of every incoming MIDI message."""

    def __init__(self, midi_input: Any) -> None:
        super().__init__(midi_input)

    @staticmethod
    def _log(message: str) -> str:
        _midi_log.debug("%s", message)
        return message

    def on_note_change(self, channel: int, pitch: int, velocity: int, on: bool) -> str:
        state = "ON" if on else "OFF"
        return self._log(f"{state:>3s} chan {channel:2d} pitch {pitch:3d} vel {velocity:3d}")

    def on_control_change(self, channel: int, controller: int, value: int) -> str:
        return self._log(f"CON chan {channel:2d} controller {int(controller):3d} val {value:3d}")

    def on_program_change(self, channel: int, program: int) -> str:
        return self._log(f"PRG chan {channel:2d} num {program:2d}")

    def on_channel_pressure_change(self, channel: int, value: int) -> str:
        return self._log(f"CHP chan {channel:2d} val {value:2d}")

    def on_pitch_bend_change(self, channel: int, value: int) -> str:
        return self._log(f" PB chan {channel:2d} val {value:5d}")

    def close(self) -> None:
        """Stop observing the MIDI input."""
        self._stop()


class StdLogger:
    """Logging target that writes one line per message to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def log_message(self, time: int, level: Any, component: str, message: str) -> None:
        try:
            label = LogLevel(level).label
        except ValueError:
            label = LogLevel.ERROR.label
        self.stream.write(f"{time} {label}({component}):{message}\r\n")