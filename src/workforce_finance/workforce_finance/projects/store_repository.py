from __future__ import annotations

from typing import Optional, Sequence

from ..storage.collection import StoreCollection
from ..storage.store import PROJECTS_KEY, KeyValueStore
from .model import ManpowerProject


class StoreProjectRepository:
    def __init__(self, store: KeyValueStore):
        self._items = StoreCollection(
            store,
            PROJECTS_KEY,
            load=ManpowerProject.from_dict,
            dump=lambda p: p.to_dict(),
            get_id=lambda p: p.id,
        )

    def list_all(self) -> Sequence[ManpowerProject]:
        return self._items.all()

    def get_by_id(self, project_id: str) -> Optional[ManpowerProject]:
        return self._items.find(project_id)

    def add(self, project: ManpowerProject) -> ManpowerProject:
        self._items.append(project)
        return project

    def update(self, project: ManpowerProject) -> bool:
        return self._items.replace(project)
