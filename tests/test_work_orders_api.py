from datetime import date

from fastapi.testclient import TestClient

from app import crud
from app.db import run_query
from app.main import app

client = TestClient(app)


def _create(**overrides):
    payload = {
        "jobNumber": "J100",
        "jobName": "Acme Tower",
        "jobPM": "Dana Reyes",
        "jobAddress": "100 Main St",
        "dateIssued": "2025-01-02",
        "items": [],
    }
    payload.update(overrides)
    r = client.post("/api/work-orders", json=payload)
    assert r.status_code == 201, r.text
    return r.json()


def test_health():
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_health_db():
    r = client.get("/api/health/db")
    assert r.status_code == 200


def test_create_returns_order_with_generated_number():
    order = _create(status="Issued")
    prefix = f"WO-{date.today().strftime('%Y%m%d')}-"
    assert order["work_order_number"] == prefix + "001"
    assert order["status"] == "Issued"
    assert order["job_name"] == "Acme Tower"
    assert order["division"] == "J"
    assert order["created_at"] == order["updated_at"]
    assert "items" not in order


def test_create_with_missing_optionals_stores_nulls():
    r = client.post("/api/work-orders", json={"jobNumber": "J1", "jobName": "Bare", "jobPM": "", "materialDeliveryDate": ""})
    assert r.status_code == 201
    order = r.json()
    assert order["job_pm"] is None
    assert order["material_delivery_date"] is None
    assert order["requested_completion_dates"] == []
    assert order["status"] == "Draft"
    assert order["date_issued"] == date.today().isoformat()


def test_round_trip_items_and_completion_dates():
    order = _create(items=[
        {"type": "Door", "elevation": "A1", "quantity": 2, "completionDates": ["2025-01-10", "2025-01-15"]},
    ])
    r = client.get(f"/api/work-orders/{order['id']}")
    assert r.status_code == 200
    body = r.json()
    assert body["order"]["id"] == order["id"]
    assert len(body["items"]) == 1
    item = body["items"][0]
    assert item["quantity"] == 2
    assert item["type"] == "Door"
    assert item["elevation"] == "A1"
    assert set(item["completion_dates"]) == {"2025-01-10", "2025-01-15"}


def test_items_keep_input_order_and_empty_dates_are_lists():
    order = _create(items=[
        {"type": "Storefront", "elevation": "B", "quantity": 1},
        {"type": "Window wall", "elevation": "C", "quantity": 3, "scope": "Kit",
         "status": "On Hold", "holdReason": "Short Material"},
    ])
    items = client.get(f"/api/work-orders/{order['id']}").json()["items"]
    assert [it["elevation"] for it in items] == ["B", "C"]
    assert items[0]["completion_dates"] == []
    assert items[1]["hold_reason"] == "Short Material"
    assert items[1]["scope"] == "Kit"


def test_derived_completion_fields():
    order = _create(items=[
        {"type": "Door", "quantity": 1, "completionDates": ["2025-02-01"]},
        {"type": "Door", "quantity": 1, "completionDates": ["2025-02-10"]},
    ])
    assert order["completion_date"] == "2025-02-10"
    assert order["completion_varies"] is True


def test_uniform_completion_date_is_stamped_on_items():
    order = _create(completionDate="2025-03-01", items=[
        {"type": "Door", "quantity": 1, "completionDates": ["2025-02-01"]},
        {"type": "Door", "quantity": 1},
    ])
    assert order["completion_date"] == "2025-03-01"
    assert order["completion_varies"] is False
    items = client.get(f"/api/work-orders/{order['id']}").json()["items"]
    assert [it["completion_dates"] for it in items] == [["2025-03-01"], ["2025-03-01"]]


def test_detail_not_found():
    r = client.get("/api/work-orders/does-not-exist")
    assert r.status_code == 404
    assert r.json() == {"error": "Not found"}


def test_update_replaces_items_wholesale():
    order = _create(items=[
        {"type": "Door", "elevation": "A1", "quantity": 2, "completionDates": ["2025-01-10"]},
        {"type": "Storefront", "elevation": "A2", "quantity": 1},
    ])
    before = client.get(f"/api/work-orders/{order['id']}").json()["items"]
    old_ids = {it["id"] for it in before}

    r = client.put(f"/api/work-orders/{order['id']}", json={
        "jobNumber": "J100",
        "jobName": "Acme Tower Phase 2",
        "status": "In Progress",
        "items": [{"type": "Curtainwall", "elevation": "N1", "quantity": 5, "completionDates": ["2025-04-01"]}],
    })
    assert r.status_code == 200
    updated = r.json()
    assert updated["job_name"] == "Acme Tower Phase 2"
    assert updated["status"] == "In Progress"
    assert updated["work_order_number"] == order["work_order_number"]
    assert updated["created_at"] == order["created_at"]
    assert updated["updated_at"] >= updated["created_at"]
    assert updated["completion_date"] == "2025-04-01"

    after = client.get(f"/api/work-orders/{order['id']}").json()["items"]
    assert [(it["type"], it["elevation"], it["quantity"], it["completion_dates"]) for it in after] == [
        ("Curtainwall", "N1", 5, ["2025-04-01"]),
    ]
    assert not old_ids & {it["id"] for it in after}
    rows = run_query("SELECT COUNT(*) AS n FROM work_order_item_completion_dates")
    assert rows[0]["n"] == 1


def test_update_overwrites_summary_fields_without_merging():
    order = _create(jobPM="Dana Reyes", status="Issued")
    r = client.put(f"/api/work-orders/{order['id']}", json={"jobNumber": "J100", "jobName": "Acme Tower"})
    assert r.status_code == 200
    updated = r.json()
    assert updated["job_pm"] is None
    assert updated["status"] == "Draft"


def test_update_not_found():
    r = client.put("/api/work-orders/missing", json={"jobNumber": "J1", "jobName": "X", "items": []})
    assert r.status_code == 404


def test_delete_cascades_to_items_and_dates():
    order = _create(items=[{"type": "Door", "quantity": 1, "completionDates": ["2025-01-10", "2025-01-11"]}])
    r = client.delete(f"/api/work-orders/{order['id']}")
    assert r.status_code == 204
    assert r.content == b""
    assert client.get(f"/api/work-orders/{order['id']}").status_code == 404
    assert run_query("SELECT COUNT(*) AS n FROM work_order_items")[0]["n"] == 0
    assert run_query("SELECT COUNT(*) AS n FROM work_order_item_completion_dates")[0]["n"] == 0


def test_delete_missing_is_still_204():
    assert client.delete("/api/work-orders/missing").status_code == 204


def test_list_filters_by_status_and_search_text():
    _create(jobName="Acme Tower", status="On Hold")
    _create(jobName="Beta Plaza", status="On Hold")
    _create(jobName="Gamma", jobPM="acme corp", status="Issued")
    _create(jobName="Delta", jobAddress="12 ACME Rd", status="On Hold")

    r = client.get("/api/work-orders", params={"status": "On Hold", "q": "Acme"})
    assert r.status_code == 200
    names = {o["job_name"] for o in r.json()}
    assert names == {"Acme Tower", "Delta"}


def test_list_search_matches_work_order_number():
    first = _create(jobName="One")
    _create(jobName="Two")
    r = client.get("/api/work-orders", params={"q": first["work_order_number"].lower()})
    assert [o["id"] for o in r.json()] == [first["id"]]


def test_list_is_newest_first():
    ids = [_create(jobName=f"Job {n}")["id"] for n in range(3)]
    r = client.get("/api/work-orders")
    assert [o["id"] for o in r.json()] == list(reversed(ids))


def test_pdf_renders_for_existing_order():
    order = _create(notes="Deliver to loading dock & call ahead", items=[
        {"type": "Door", "elevation": "A1", "quantity": 2, "completionDates": ["2025-01-10"]},
    ])
    r = client.get(f"/api/work-orders/{order['id']}/pdf")
    assert r.status_code == 200
    assert r.headers["content-type"] == "application/pdf"
    assert r.headers["content-disposition"] == f'inline; filename="{order["work_order_number"]}.pdf"'
    assert r.content.startswith(b"%PDF")


def test_pdf_not_found():
    r = client.get("/api/work-orders/missing/pdf")
    assert r.status_code == 404
    assert r.headers["content-type"].startswith("application/json")


def test_invalid_payload_is_rejected():
    r = client.post("/api/work-orders", json={"jobNumber": "J1", "jobName": "X", "items": [{"type": "Door", "quantity": -1}]})
    assert r.status_code == 422
    assert r.json()["error"] == "Invalid request"

    r = client.post("/api/work-orders", json={"jobNumber": "J1", "jobName": "X", "status": "Archived"})
    assert r.status_code == 422


def test_unhandled_error_returns_generic_message(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("connection to server lost: secret detail")

    monkeypatch.setattr(crud, "list_work_orders", boom)
    safe_client = TestClient(app, raise_server_exceptions=False)
    r = safe_client.get("/api/work-orders")
    assert r.status_code == 500
    assert r.json() == {"error": "Server error"}
