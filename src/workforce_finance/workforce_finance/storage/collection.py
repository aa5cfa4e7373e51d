from __future__ import annotations

import uuid
from typing import Callable, Generic, Optional, TypeVar

from .store import KeyValueStore

T = TypeVar("T")


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


class StoreCollection(Generic[T]):
    """Typed list-of-records view over one key of a :class:`KeyValueStore`.

    Every mutation is read-modify-write of the whole collection (get-all then
    set-all), which is all the store guarantees.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        *,
        load: Callable[[dict], T],
        dump: Callable[[T], dict],
        get_id: Callable[[T], str],
    ):
        self._store = store
        self._key = key
        self._load = load
        self._dump = dump
        self._get_id = get_id

    @property
    def key(self) -> str:
        return self._key

    def all(self) -> list[T]:
        return [self._load(raw) for raw in self._store.get(self._key) or []]

    def save_all(self, items: list[T]) -> None:
        self._store.set(self._key, [self._dump(i) for i in items])

    def find(self, item_id: str) -> Optional[T]:
        for item in self.all():
            if self._get_id(item) == item_id:
                return item
        return None

    def append(self, *items: T) -> None:
        current = self.all()
        current.extend(items)
        self.save_all(current)

    def replace(self, item: T) -> bool:
        current = self.all()
        item_id = self._get_id(item)
        for i, existing in enumerate(current):
            if self._get_id(existing) == item_id:
                current[i] = item
                self.save_all(current)
                return True
        return False

    def remove_where(self, predicate: Callable[[T], bool]) -> int:
        current = self.all()
        kept = [i for i in current if not predicate(i)]
        removed = len(current) - len(kept)
        if removed:
            self.save_all(kept)
        return removed
