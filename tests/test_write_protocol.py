from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from app import crud, models, schemas
from app.core import numbering
from app.core.exceptions import WorkOrderNumberConflict
from app.crud import work_order as work_order_crud
from app.db import SessionLocal, run_query
from app.main import app

DAY = date(2025, 1, 1)

client = TestClient(app)


def _payload(**overrides):
    data = {
        "jobNumber": "J100",
        "jobName": "Acme Tower",
        "items": [{"type": "Door", "elevation": "A1", "quantity": 2, "completionDates": ["2025-01-10"]}],
    }
    data.update(overrides)
    return schemas.WorkOrderCreate.model_validate(data)


def _count(table):
    return run_query(f"SELECT COUNT(*) AS n FROM {table}")[0]["n"]


def test_database_rejects_duplicate_numbers(db):
    crud.create_work_order(db, _payload(), today=DAY)
    db.add(models.WorkOrder(work_order_number="WO-20250101-001", job_name="Dup"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()
    assert _count("work_orders") == 1


def test_stale_number_scan_retries_with_next_number(db, monkeypatch):
    """Simulates two creates racing: the second one scanned before the first committed."""
    crud.create_work_order(db, _payload(), today=DAY)

    real_generate = numbering.generate_work_order_number
    calls = []

    def stale_then_real(session, day):
        calls.append(day)
        if len(calls) == 1:
            return "WO-20250101-001"
        return real_generate(session, day)

    monkeypatch.setattr(work_order_crud, "generate_work_order_number", stale_then_real)

    with SessionLocal() as other:
        second = crud.create_work_order(other, _payload(jobName="Second"), today=DAY)
        assert second.work_order_number == "WO-20250101-002"

    assert len(calls) == 2
    numbers = [r["work_order_number"] for r in run_query("SELECT work_order_number FROM work_orders")]
    assert sorted(numbers) == ["WO-20250101-001", "WO-20250101-002"]
    # the failed attempt left no items behind
    assert _count("work_order_items") == 2


def test_conflict_after_max_attempts_raises(db, monkeypatch):
    crud.create_work_order(db, _payload(), today=DAY)
    monkeypatch.setattr(work_order_crud, "generate_work_order_number", lambda session, day: "WO-20250101-001")

    with pytest.raises(WorkOrderNumberConflict) as excinfo:
        crud.create_work_order(db, _payload(), today=DAY, max_attempts=3)
    assert excinfo.value.attempts == 3
    assert _count("work_orders") == 1


def test_conflict_is_reported_as_409(monkeypatch):
    first = client.post("/api/work-orders", json={"jobNumber": "J1", "jobName": "First"}).json()
    monkeypatch.setattr(work_order_crud, "generate_work_order_number",
                        lambda session, day: first["work_order_number"])

    r = client.post("/api/work-orders", json={"jobNumber": "J2", "jobName": "Second"})
    assert r.status_code == 409
    assert "error" in r.json()


def test_failed_item_insert_rolls_back_whole_create(db, monkeypatch):
    def broken_insert(*args, **kwargs):
        raise RuntimeError("connection lost")

    monkeypatch.setattr(work_order_crud, "_insert_items", broken_insert)
    with pytest.raises(RuntimeError):
        crud.create_work_order(db, _payload(), today=DAY)

    assert _count("work_orders") == 0
    assert _count("work_order_items") == 0


def test_failed_update_keeps_previous_items(db, monkeypatch):
    order = crud.create_work_order(db, _payload(), today=DAY)
    order_id = order.id

    def broken_insert(*args, **kwargs):
        raise RuntimeError("connection lost")

    monkeypatch.setattr(work_order_crud, "_insert_items", broken_insert)
    with pytest.raises(RuntimeError):
        crud.update_work_order(db, order_id, _payload(jobName="Renamed", items=[]))

    with SessionLocal() as fresh:
        detail = crud.get_work_order_detail(fresh, order_id)
    assert detail.order.job_name == "Acme Tower"
    assert [it.elevation for it in detail.items] == ["A1"]
    assert detail.items[0].completion_dates == [date(2025, 1, 10)]


def test_update_preserves_number_and_created_at(db):
    order = crud.create_work_order(db, _payload(), today=DAY)
    number, created_at = order.work_order_number, order.created_at

    updated = crud.update_work_order(db, order.id, _payload(status="Complete", items=[]))
    assert updated.work_order_number == number
    assert updated.created_at == created_at
    assert updated.updated_at >= updated.created_at
    assert updated.status == "Complete"
    assert updated.completion_date is None
    assert updated.completion_varies is False


def test_update_missing_returns_none(db):
    assert crud.update_work_order(db, "missing", _payload()) is None


def test_delete_missing_returns_false(db):
    assert crud.delete_work_order(db, "missing") is False


def test_detail_completion_dates_keep_insertion_order(db):
    order = crud.create_work_order(db, _payload(items=[
        {"type": "Door", "quantity": 1, "completionDates": ["2025-03-01", "2025-01-01", "2025-02-01"]},
    ]), today=DAY)
    detail = crud.get_work_order_detail(db, order.id)
    assert detail.items[0].completion_dates == [date(2025, 3, 1), date(2025, 1, 1), date(2025, 2, 1)]


def test_explicit_division_is_kept(db):
    order = crud.create_work_order(db, _payload(division="Glazing"), today=DAY)
    assert order.division == "Glazing"
