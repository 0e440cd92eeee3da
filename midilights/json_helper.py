"""Type-checked access to items of a JSON object."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

_log = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class JsonHelper:
    """Fetches items from a decoded JSON object, checking their types.

    Every getter returns None when the key is missing or its value has the
    wrong type; the problem is logged as an error under the given user name.
    """

    def __init__(self, user: str, json: Any, log_missing_keys: bool = True) -> None:
        self.user = user
        self.json = json
        self.log_missing_keys = log_missing_keys
        if not isinstance(json, Mapping):
            _log.error("%s: Passed object not a JSON object", user)

    def _lookup(self, key: str) -> Any:
        if not isinstance(self.json, Mapping):
            return None
        return self.json.get(key)

    def _present(self, key: str) -> Any:
        value = self._lookup(key)
        if value is None and self.log_missing_keys:
            _log.error("%s: Missing JSON key '%s'", self.user, key)
        return value

    def _wrong_type(self, key: str, kind: str) -> None:
        _log.error("%s: JSON value with key '%s' not %s", self.user, key, kind)

    def get_int(self, key: str) -> int | None:
        """Return the item as an int, truncating any fraction."""
        value = self._present(key)
        if value is None:
            return None
        if not _is_number(value):
            self._wrong_type(key, "a number")
            return None
        return int(value)

    def get_float(self, key: str) -> float | None:
        """Return the item as a float."""
        value = self._present(key)
        if value is None:
            return None
        if not _is_number(value):
            self._wrong_type(key, "a number")
            return None
        return float(value)

    def get_bool(self, key: str) -> bool | None:
        """Return the item if it is a boolean."""
        value = self._present(key)
        if value is None:
            return None
        if not isinstance(value, bool):
            self._wrong_type(key, "a boolean")
            return None
        return value

    def get_str(self, key: str) -> str | None:
        """Return the item if it is a string."""
        value = self._present(key)
        if value is None:
            return None
        if not isinstance(value, str):
            self._wrong_type(key, "a string")
            return None
        return value

    def get_object(self, key: str) -> dict[str, Any] | None:
        """Return a copy of the item if it is a JSON object."""
        value = self._present(key)
        if value is None:
            return None
        if not isinstance(value, Mapping):
            self._wrong_type(key, "an object")
            return None
        return dict(value)

    def get_array(self, key: str) -> list[Any] | None:
        """Return a copy of the item if it is a JSON array."""
        value = self._present(key)
        if value is None:
            return None
        if not isinstance(value, list):
            self._wrong_type(key, "an array")
            return None
        return list(value)