"""Example: use the calculation engine and services without Flask.

Controllers are thin; everything below is what they call.
"""

from workforce_finance.common.datetime_utils import today_local
from workforce_finance.container import build_container
from workforce_finance.database.bootstrap import seed_store
from workforce_finance.finance.formulas import calculate_financials
from workforce_finance.storage.memory_store import InMemoryKeyValueStore


def main():
    print(calculate_financials(160, 10, 30, 50))

    store = InMemoryKeyValueStore()
    seed_store(store, today=today_local())
    container = build_container(store=store)

    print(container.analytics_service.dashboard())
    for insight in container.insight_service.generate():
        print(insight.priority, insight.type.value, insight.title)


if __name__ == "__main__":
    main()
