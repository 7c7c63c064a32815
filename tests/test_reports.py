from __future__ import annotations

from datetime import datetime

import pytest

from saharapor.models.reports import (
    ReportValidationError,
    SorunTipi,
    build_report,
    form_options,
    normalize_team_code,
    parse_location,
    parse_turkish_timestamp,
    turkish_timestamp,
)


def test_normalize_team_code_trims_and_uppercases() -> None:
    assert normalize_team_code("  saha17550 ") == "SAHA17550"


@pytest.mark.parametrize("raw", ["", "  ab ", None, "X" * 16])
def test_normalize_team_code_rejects_bad_lengths(raw) -> None:
    with pytest.raises(ReportValidationError):
        normalize_team_code(raw)


def test_parse_location() -> None:
    assert parse_location(None) is None
    assert parse_location({"lat": "41.0", "lng": 29}) == {"lat": 41.0, "lng": 29.0}
    with pytest.raises(ReportValidationError):
        parse_location("41,29")
    with pytest.raises(ReportValidationError):
        parse_location({"lat": "north", "lng": 29})


def test_build_problem_report_sets_envelope_fields() -> None:
    now = datetime(2025, 3, 5, 14, 7, 9)
    record = build_report(
        "problem",
        {"hizmetNo": " 8821 ", "saha": "KADIKOY", "kutu": "K12", "aciklama": "seviye yok",
         "location": {"lat": 40.99, "lng": 29.03}},
        "SAHA17550",
        now=now,
    )

    assert record["reportType"] == "problem"
    assert record["ekipKodu"] == "SAHA17550"
    assert record["timestamp"] == "05.03.2025 14:07:09"
    assert record["status"] == "pending"
    assert record["hizmetNo"] == "8821"
    assert record["sorunTipi"] == SorunTipi.GPON_SEVIYE_YOK.value
    assert record["location"] == {"lat": 40.99, "lng": 29.03}
    assert record["photo"] is None
    assert len(record["id"]) == 36


def test_build_report_rejects_missing_required_field() -> None:
    with pytest.raises(ReportValidationError, match="saha"):
        build_report("problem", {"hizmetNo": "1", "kutu": "K", "aciklama": "x"}, "SAHA1")


def test_build_report_rejects_unknown_type() -> None:
    with pytest.raises(ReportValidationError):
        build_report("weather", {}, "SAHA1")


def test_vehicle_log_normalises_plate_and_kilometre() -> None:
    record = build_report("vehicle_log", {"plaka": "34 abc 12", "kilometre": "120500"}, "SAHA1")
    assert record["plaka"] == "34 ABC 12"
    assert record["kilometre"] == 120500

    with pytest.raises(ReportValidationError):
        build_report("vehicle_log", {"plaka": "34 ABC 12", "kilometre": "-5"}, "SAHA1")


def test_job_completion_always_counts_one() -> None:
    record = build_report("job_completion", {"hizmetNo": "77", "isTipi": "TESİS", "isAdedi": 9}, "SAHA1")
    assert record["isAdedi"] == 1
    assert record["isTipi"] == "TESİS"


def test_inventory_install_requires_service_number() -> None:
    with pytest.raises(ReportValidationError, match="hizmetNo"):
        build_report("inventory", {"actionType": "install", "serialNumber": "abc"}, "SAHA1")

    record = build_report("inventory", {"actionType": "receive", "serialNumber": "zte123"}, "SAHA1")
    assert record["serialNumber"] == "ZTE123"
    assert record["deviceType"] == "MODEM"
    assert record["hizmetNo"] == ""


def test_improvement_defaults_and_score_bounds() -> None:
    record = build_report("improvement", {"yerlesimAdi": "MODA"}, "SAHA1")
    assert record["kabloDurumu"] == "İYİ"
    assert record["takdirPuani"] == 5
    assert len(record["bakimTarihi"]) == 10

    with pytest.raises(ReportValidationError):
        build_report("improvement", {"yerlesimAdi": "MODA", "takdirPuani": 11}, "SAHA1")
    with pytest.raises(ReportValidationError):
        build_report("improvement", {"yerlesimAdi": "MODA", "menholDurumu": "PERFECT"}, "SAHA1")


def test_damage_report_required_fields() -> None:
    data = {
        "projeId": "P-1", "hasarYapanAdSoyad": "Acme İnşaat", "hasarYeri": "Bağdat Cd.",
        "hasarOlusSekli": "Kepçe darbesi", "duzenleyenPersonel": "Ali Veli",
    }
    record = build_report("damage_report", data, "KABLO17501")
    assert record["hasarTarihi"]
    assert record["hasarSaati"]
    assert record["tcKimlik"] == ""

    del data["hasarOlusSekli"]
    with pytest.raises(ReportValidationError):
        build_report("damage_report", data, "KABLO17501")


def test_turkish_timestamp_round_trip_parsing() -> None:
    now = datetime(2024, 12, 31, 23, 59, 1)
    assert parse_turkish_timestamp(turkish_timestamp(now)) == now
    assert parse_turkish_timestamp("31.12.2024 23:59") == datetime(2024, 12, 31, 23, 59)
    assert parse_turkish_timestamp("yesterday") is None


def test_form_options_lists_every_report_type() -> None:
    options = form_options()
    assert "damage_report" in options["reportTypes"]
    assert options["isTipleri"] == ["ARIZA", "TESİS"]
    assert len(options["sorunTipleri"]) == 9


@pytest.mark.parametrize("kilometre", ["inf", "-inf", "nan", 1e400])
def test_vehicle_log_rejects_non_finite_kilometre(kilometre) -> None:
    with pytest.raises(ReportValidationError, match="kilometre"):
        build_report("vehicle_log", {"plaka": "34 ABC 12", "kilometre": kilometre}, "SAHA1")


def test_non_finite_number_is_a_bad_request(crew_client) -> None:
    response = crew_client.post("/api/reports/vehicle_log", json={"plaka": "34 ABC 12", "kilometre": "inf"})
    assert response.status_code == 400
