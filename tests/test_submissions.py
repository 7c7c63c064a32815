from __future__ import annotations

import json

import requests

from saharapor.components.submissions import forwarder as forwarder_module
from saharapor.components.submissions.forwarder import SheetForwarder

from conftest import FakeResponse

PROBLEM = {"hizmetNo": "8821", "saha": "KADIKOY", "kutu": "K12", "aciklama": "GPON seviye yok"}


def test_session_login_and_logout(client) -> None:
    assert client.get("/api/session").get_json() == {"logged_in": False, "ekipKodu": ""}

    response = client.post("/api/session", json={"ekipKodu": " kablo17501 "})
    assert response.get_json() == {"logged_in": True, "ekipKodu": "KABLO17501"}
    assert client.get("/api/session").get_json()["ekipKodu"] == "KABLO17501"

    client.delete("/api/session")
    assert client.get("/api/session").get_json()["logged_in"] is False


def test_login_rejects_short_code(client) -> None:
    response = client.post("/api/session", json={"ekipKodu": "ab"})
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_crew_endpoints_require_login(client) -> None:
    assert client.post("/api/reports/problem", json=PROBLEM).status_code == 401
    assert client.get("/api/history").status_code == 401
    assert client.get("/api/jobs/summary").status_code == 401


def test_submit_without_sheet_url_is_pending(crew_client, crew_store) -> None:
    response = crew_client.post("/api/reports/problem", json=PROBLEM)

    assert response.status_code == 201
    record = response.get_json()
    assert record["status"] == "pending"
    assert record["ekipKodu"] == "SAHA17550"
    assert crew_store.load("SAHA17550")["reports"][0]["id"] == record["id"]


def test_submit_forwards_to_configured_sheet(crew_client, monkeypatch) -> None:
    calls = []

    def fake_post(url, data=None, headers=None, timeout=None):
        calls.append((url, json.loads(data.decode("utf-8")), headers, timeout))
        return FakeResponse(200, "Başarılı")

    monkeypatch.setattr(forwarder_module.requests, "post", fake_post)
    crew_client.put("/api/settings", json={"sheetUrl": "https://script.example.com/exec"})

    response = crew_client.post("/api/reports/vehicle_log", json={"plaka": "34abc12", "kilometre": 1500})
    record = response.get_json()

    assert record["status"] == "sent"
    url, body, headers, timeout = calls[0]
    assert url == "https://script.example.com/exec"
    assert body["reportType"] == "vehicle_log"
    assert body["plaka"] == "34ABC12"
    assert headers["Content-Type"].startswith("text/plain")
    assert timeout == 10


def test_forwarder_marks_network_failure_as_error(monkeypatch) -> None:
    def fake_post(*args, **kwargs):
        raise requests.exceptions.ConnectionError("offline")

    monkeypatch.setattr(forwarder_module.requests, "post", fake_post)
    assert SheetForwarder().forward("https://script.example.com/exec", {"id": "1"}) == "error"


def test_forwarder_marks_script_error_reply_as_error(monkeypatch) -> None:
    monkeypatch.setattr(forwarder_module.requests, "post",
                        lambda *a, **k: FakeResponse(200, "Hata: Sheet bulunamadı"))
    assert SheetForwarder().forward("https://script.example.com/exec", {"id": "1"}) == "error"

    monkeypatch.setattr(forwarder_module.requests, "post", lambda *a, **k: FakeResponse(500, ""))
    assert SheetForwarder().forward("https://script.example.com/exec", {"id": "1"}) == "error"


def test_forwarder_without_url_is_pending() -> None:
    assert SheetForwarder().forward("", {"id": "1"}) == "pending"


def test_failed_forward_still_stores_record(crew_client, crew_store, monkeypatch) -> None:
    def fake_post(*args, **kwargs):
        raise requests.exceptions.Timeout("slow")

    monkeypatch.setattr(forwarder_module.requests, "post", fake_post)
    crew_client.put("/api/settings", json={"sheetUrl": "https://script.example.com/exec"})

    record = crew_client.post("/api/reports/port_change", json={"hizmetNo": "12", "yeniPort": "1-4"}).get_json()
    assert record["status"] == "error"
    assert crew_store.load("SAHA17550")["portChanges"][0]["id"] == record["id"]


def test_validation_error_is_400(crew_client) -> None:
    response = crew_client.post("/api/reports/problem", json={"hizmetNo": "1"})
    assert response.status_code == 400
    assert "saha" in response.get_json()["error"]

    assert crew_client.post("/api/reports/unknown", json={}).status_code == 400
    assert crew_client.post("/api/reports/problem", data="nope").status_code == 400


def test_history_is_newest_first(crew_client) -> None:
    first = crew_client.post("/api/reports/problem", json=PROBLEM).get_json()
    second = crew_client.post("/api/reports/problem", json=dict(PROBLEM, hizmetNo="9000")).get_json()
    crew_client.post("/api/reports/job_completion", json={"hizmetNo": "77"})

    history = crew_client.get("/api/history").get_json()
    assert [r["id"] for r in history["records"]] == [second["id"], first["id"]]

    everything = crew_client.get("/api/history?all=1").get_json()
    assert everything["total"] == 3
    assert {r["reportType"] for r in everything["records"]} == {"problem", "job_completion"}


def test_job_summary_counts_by_type(crew_client) -> None:
    for job_type in ("ARIZA", "ARIZA", "TESİS"):
        crew_client.post("/api/reports/job_completion", json={"hizmetNo": "77", "isTipi": job_type})

    assert crew_client.get("/api/jobs/summary").get_json() == {"ariza": 2, "tesis": 1, "total": 3}


def test_records_survive_logout(crew_client) -> None:
    crew_client.post("/api/reports/problem", json=PROBLEM)
    crew_client.delete("/api/session")
    crew_client.post("/api/session", json={"ekipKodu": "SAHA17550"})

    assert crew_client.get("/api/history").get_json()["total"] == 1


def test_options_are_public(client) -> None:
    assert "modemTipleri" in client.get("/api/options").get_json()
