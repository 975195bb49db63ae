from __future__ import annotations

import json

from fastapi.testclient import TestClient

from receipt_processor.api.main import create_app
from receipt_processor.core.config import Settings
from receipt_processor.core.logging_config import configure_logging


def test_process_then_get_points_target(client, target_payload):
    resp = client.post("/receipts/process", json=target_payload)
    assert resp.status_code == 200
    receipt_id = resp.json()["id"]

    resp = client.get(f"/receipts/{receipt_id}/points")
    assert resp.status_code == 200
    assert resp.json() == {"points": 28}


def test_process_then_get_points_corner_market(client, corner_market_payload):
    receipt_id = client.post("/receipts/process", json=corner_market_payload).json()["id"]
    assert client.get(f"/receipts/{receipt_id}/points").json() == {"points": 109}


def test_processed_receipt_is_kept_in_injected_store(client, store, target_payload):
    receipt_id = client.post("/receipts/process", json=target_payload).json()["id"]
    stored = store.get(receipt_id)
    assert stored is not None
    assert stored.points == 28
    assert stored.retailer == "Target"


def test_same_receipt_twice_gets_two_ids(client, target_payload):
    first = client.post("/receipts/process", json=target_payload).json()["id"]
    second = client.post("/receipts/process", json=target_payload).json()["id"]
    assert first != second
    assert client.get(f"/receipts/{second}/points").json() == {"points": 28}


def test_unknown_id_is_404(client):
    resp = client.get("/receipts/7fb1377b-b223-49d9-a31a-5a02701dd310/points")
    assert resp.status_code == 404
    assert resp.text == "Receipt not found"


def test_invalid_json_is_400(client):
    resp = client.post(
        "/receipts/process",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == "Invalid JSON format. Please verify input."


def test_wrongly_typed_field_is_400(client, target_payload):
    target_payload["total"] = 35.35
    resp = client.post("/receipts/process", json=target_payload)
    assert resp.status_code == 400
    assert resp.text == "Invalid JSON format. Please verify input."


def test_empty_body_is_400(client):
    resp = client.post("/receipts/process")
    assert resp.status_code == 400


def test_missing_field_is_400_with_error_body(client, target_payload):
    del target_payload["retailer"]
    resp = client.post("/receipts/process", json=target_payload)
    assert resp.status_code == 400
    assert resp.headers["content-type"].startswith("text/plain")
    assert json.loads(resp.text) == {
        "message": "missing required field",
        "code": "MISSING_FIELD",
        "field": "retailer",
    }


def test_invalid_item_price_is_400(client, target_payload):
    target_payload["items"][3]["price"] = "3.5"
    resp = client.post("/receipts/process", json=target_payload)
    assert resp.status_code == 400
    body = json.loads(resp.text)
    assert body["code"] == "INVALID_FORMAT"
    assert body["field"] == "items[3].price"
    assert body["value"] == "3.5"


def test_rejected_receipt_is_not_stored(client, store, target_payload):
    target_payload["purchaseTime"] = "16:61"
    assert client.post("/receipts/process", json=target_payload).status_code == 400
    assert len(store) == 0


def test_client_supplied_id_and_points_are_ignored(client, target_payload):
    target_payload["id"] = "chosen-by-client"
    target_payload["points"] = 1000
    receipt_id = client.post("/receipts/process", json=target_payload).json()["id"]
    assert receipt_id != "chosen-by-client"
    assert client.get(f"/receipts/{receipt_id}/points").json() == {"points": 28}
    assert client.get("/receipts/chosen-by-client/points").status_code == 404


def test_apps_have_independent_stores(target_payload):
    first, second = create_app(), create_app()

    receipt_id = TestClient(first).post("/receipts/process", json=target_payload).json()["id"]
    assert TestClient(second).get(f"/receipts/{receipt_id}/points").status_code == 404


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "environment": "test", "version": "1.0.0"}


def test_lifespan_writes_daily_log_file(store, target_payload, tmp_path):
    app = create_app(settings=Settings(ENVIRONMENT="test", LOG_DIR=str(tmp_path)), store=store)
    try:
        with TestClient(app) as client:
            assert client.post("/receipts/process", json=target_payload).status_code == 200
        log_files = list(tmp_path.glob("receipt_processor_*.log"))
        assert len(log_files) == 1
        assert "Receipt processed" in log_files[0].read_text(encoding="utf-8")
    finally:
        configure_logging(Settings(ENVIRONMENT="test"))


def test_very_long_total_is_scored(client, target_payload):
    target_payload["total"] = "9" * 5000 + ".00"
    resp = client.post("/receipts/process", json=target_payload)
    assert resp.status_code == 200
    receipt_id = resp.json()["id"]
    # 28 for the fixture plus 50 + 25 for a round total
    assert client.get(f"/receipts/{receipt_id}/points").json() == {"points": 103}


def test_body_that_is_not_utf8_is_400_plain_text(client, store):
    resp = client.post(
        "/receipts/process",
        content=b'{"retailer": "\xff\xfe"}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == "Invalid JSON format. Please verify input."
    assert len(store) == 0


def test_other_http_errors_keep_default_json(client):
    resp = client.delete("/receipts/process")
    assert resp.status_code == 405
    assert resp.json() == {"detail": "Method Not Allowed"}
