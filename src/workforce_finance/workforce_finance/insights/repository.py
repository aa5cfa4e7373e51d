from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ActionableInsight


class InsightRepository(Protocol):
    def list_all(self) -> Sequence[ActionableInsight]:
        raise NotImplementedError

    def get_by_id(self, insight_id: str) -> Optional[ActionableInsight]:
        raise NotImplementedError

    def save_all(self, insights: Sequence[ActionableInsight]) -> None:
        raise NotImplementedError

    def update(self, insight: ActionableInsight) -> bool:
        raise NotImplementedError
