from __future__ import annotations

from typing import Optional, Sequence

from ..storage.collection import StoreCollection
from ..storage.store import INSIGHTS_KEY, KeyValueStore
from .model import ActionableInsight, insight_from_dict


class StoreInsightRepository:
    def __init__(self, store: KeyValueStore):
        self._items = StoreCollection(
            store,
            INSIGHTS_KEY,
            load=insight_from_dict,
            dump=lambda i: i.to_dict(),
            get_id=lambda i: i.id,
        )

    def list_all(self) -> Sequence[ActionableInsight]:
        return self._items.all()

    def get_by_id(self, insight_id: str) -> Optional[ActionableInsight]:
        return self._items.find(insight_id)

    def save_all(self, insights: Sequence[ActionableInsight]) -> None:
        self._items.save_all(list(insights))

    def update(self, insight: ActionableInsight) -> bool:
        return self._items.replace(insight)
