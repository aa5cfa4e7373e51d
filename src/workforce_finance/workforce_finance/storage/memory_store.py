from __future__ import annotations

from typing import Optional

from .store import KeyValueStore, decode_json, encode_json


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store for tests and demos.

    Values are kept JSON-encoded so callers never share mutable state with the
    store, the same as with a real backend.
    """

    def __init__(self, initial: Optional[dict[str, list[dict]]] = None):
        self._data: dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Optional[list[dict]]:
        return decode_json(self._data.get(key))

    def set(self, key: str, value: list[dict]) -> None:
        self._data[key] = encode_json(value)

    def keys(self) -> list[str]:
        return sorted(self._data)
