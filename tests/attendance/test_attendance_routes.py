from __future__ import annotations

import pytest

from src.qr_attendance.qr_attendance.core.exceptions import StoreCommunicationError


def test_check_in_opens_record(client, attendance_repo):
    resp = client.post("/api/assistance/in", json={"userId": 5, "latitude": -12.05, "longitude": -77.04})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["action"] == "opened_check_in"
    assert body["message"] == "¡Entrada registrada a las 10:00!"
    assert attendance_repo.creates[0]["extra"] == {"x_latitude": -12.05, "x_longitude": -77.04}


def test_check_in_with_open_record_is_conflict(client, attendance_repo):
    attendance_repo.add(8, 5, "2026-02-24 08:00:00")

    resp = client.post("/api/assistance/in", json={"userId": 5})

    assert resp.status_code == 409
    body = resp.get_json()
    assert body["success"] is False
    assert body["error"].startswith("Ya tienes un registro de entrada abierto")
    assert body["details"]["attendance_id"] == 8
    assert body["details"]["hours_open"] == 2.0


def test_check_in_after_auto_close_explains_it(client, attendance_repo):
    attendance_repo.add(8, 5, "2026-02-22 08:00:00")

    resp = client.post("/api/assistance/in", json={"userId": 5})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["data"]["auto_closed"]["check_out"] == "2026-02-22 23:59:59"
    assert "se cerró automáticamente" in body["message"]


def test_failed_auto_close_is_conflict(client, attendance_repo):
    attendance_repo.add(8, 5, "2026-02-22 08:00:00")
    attendance_repo.fail_writes = True

    resp = client.post("/api/assistance/in", json={"userId": 5})

    assert resp.status_code == 409
    assert resp.get_json()["details"] == {"attendance_id": 8}


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"userId": "abc"},
        {"userId": 5, "latitude": -12.0},
        {"userId": 5, "latitude": 120.0, "longitude": -77.0},
    ],
)
def test_check_in_validation_errors(client, body):
    resp = client.post("/api/assistance/in", json=body)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_non_json_body_is_rejected(client):
    resp = client.post("/api/assistance/in", data="userId=5", content_type="text/plain")

    assert resp.status_code == 400


def test_store_outage_is_bad_gateway(client, attendance_repo, monkeypatch):
    def unreachable(employee_id):
        raise StoreCommunicationError("timeout")

    monkeypatch.setattr(attendance_repo, "find_open_for_employee", unreachable)

    resp = client.post("/api/assistance/in", json={"userId": 5})

    assert resp.status_code == 502
    assert resp.get_json()["error"] == "Error de conexión con Odoo"


def test_check_out_with_nested_geo(client, attendance_repo):
    attendance_repo.add(8, 5, "2026-02-24 08:00:00")

    resp = client.post(
        "/api/assistance/out",
        json={"registryId": 8, "geo": {"lat": -12.1, "lon": -77.1, "accuracy": 8}},
    )

    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"action": "closed_ok", "attendance_id": 8, "check_out": "2026-02-24 10:00:00"}
    assert attendance_repo.writes[0]["extra"] == {
        "x_latitude_out": -12.1,
        "x_longitude_out": -77.1,
        "x_accuracy_out": 8.0,
    }


def test_scan_requires_valid_token(client, attendance_repo):
    resp = client.post("/api/assistance/scan", json={"userId": 5, "code": "WRONG"})

    assert resp.status_code == 400
    assert attendance_repo.creates == []


def test_scan_toggles_attendance(client, attendance_repo):
    first = client.post("/api/assistance/scan", json={"userId": 5, "code": "TEST_QR_TOKEN"})
    second = client.post("/api/assistance/scan", json={"userId": 5, "code": "TEST_QR_TOKEN"})

    assert first.get_json()["data"]["action"] == "opened_check_in"
    assert second.get_json()["data"]["action"] == "closed_ok"


def test_history(client, attendance_repo):
    attendance_repo.add(1, 5, "2026-02-23 08:00:00", "2026-02-23 17:00:00", worked_hours=9.0)
    attendance_repo.add(2, 5, "2026-02-24 07:00:00", "2026-02-24 09:30:00", worked_hours=2.5)

    today = client.post("/api/assistance", json={"userId": 5}).get_json()
    everything = client.post("/api/assistance", json={"userId": 5, "allHistory": True}).get_json()

    assert today["data"]["count"] == 1
    assert today["data"]["filter"] == "today"
    assert today["message"] == "1 registro(s), 2h 30m trabajadas"
    assert everything["data"]["count"] == 2
    assert everything["data"]["total_hours"] == 11.5
