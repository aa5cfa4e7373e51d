from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ManpowerProject


class ProjectRepository(Protocol):
    def list_all(self) -> Sequence[ManpowerProject]:
        raise NotImplementedError

    def get_by_id(self, project_id: str) -> Optional[ManpowerProject]:
        raise NotImplementedError

    def add(self, project: ManpowerProject) -> ManpowerProject:
        raise NotImplementedError

    def update(self, project: ManpowerProject) -> bool:
        raise NotImplementedError
