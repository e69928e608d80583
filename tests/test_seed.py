from app import crud
from app.db import SessionLocal
from scripts.seed_work_orders import SAMPLE_ORDERS, seed


def test_seed_creates_sample_orders_once():
    created = seed()
    assert [job for _, job in created] == [o["jobName"] for o in SAMPLE_ORDERS]
    assert all(number.startswith("WO-") for number, _ in created)

    assert seed() == []

    with SessionLocal() as db:
        assert len(crud.list_work_orders(db)) == len(SAMPLE_ORDERS)


def test_seed_force_adds_another_batch():
    seed()
    again = seed(force=True)
    assert len(again) == len(SAMPLE_ORDERS)

    with SessionLocal() as db:
        numbers = [o.work_order_number for o in crud.list_work_orders(db)]
    assert len(numbers) == len(set(numbers)) == 2 * len(SAMPLE_ORDERS)
