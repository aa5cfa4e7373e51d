from decimal import Decimal

from factories import TODAY, make_employee
from workforce_finance.database.bootstrap import seed_store
from workforce_finance.employees.model import Employee
from workforce_finance.storage.collection import StoreCollection
from workforce_finance.storage.memory_store import InMemoryKeyValueStore
from workforce_finance.storage.store import ATTENDANCE_KEY, EMPLOYEES_KEY


def _collection(store):
    return StoreCollection(
        store,
        EMPLOYEES_KEY,
        load=Employee.from_dict,
        dump=lambda e: e.to_dict(),
        get_id=lambda e: e.id,
    )


def test_memory_store_does_not_share_state():
    store = InMemoryKeyValueStore()
    rows = [{"id": "a", "amount": Decimal("1.50")}]
    store.set("things", rows)
    rows.append({"id": "b"})

    loaded = store.get("things")
    loaded.append({"id": "c"})

    assert store.get("things") == [{"id": "a", "amount": "1.50"}]
    assert store.get("missing") is None
    assert store.keys() == ["things"]


def test_collection_replace_and_remove(store):
    items = _collection(store)
    items.append(make_employee("emp_1"), make_employee("emp_2"))

    assert items.replace(make_employee("emp_2", actual="60"))
    assert not items.replace(make_employee("emp_3"))
    assert items.find("emp_2").actual_rate == Decimal("60")

    assert items.remove_where(lambda e: e.id == "emp_1") == 1
    assert items.remove_where(lambda e: e.id == "emp_1") == 0
    assert [e.id for e in items.all()] == ["emp_2"]


def test_seed_skips_populated_store_unless_forced(store):
    assert seed_store(store, today=TODAY)
    seeded = store.get(EMPLOYEES_KEY)
    assert seeded
    assert store.get(ATTENDANCE_KEY)

    store.set(EMPLOYEES_KEY, seeded[:1])
    assert not seed_store(store, today=TODAY)
    assert len(store.get(EMPLOYEES_KEY)) == 1

    assert seed_store(store, today=TODAY, force=True)
    assert len(store.get(EMPLOYEES_KEY)) == len(seeded)


def test_seeded_data_loads_as_domain_objects(container):
    seed_store(container.store, today=TODAY)

    employees = container.employees_repo.list_all()
    project_ids = {p.id for p in container.projects_repo.list_all()}

    assert all(e.actual_rate > e.hourly_rate for e in employees)
    assert {e.project_id for e in employees if e.project_id} <= project_ids
    assert container.attendance_repo.list_in_range(end=TODAY)
