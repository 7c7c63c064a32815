from __future__ import annotations

import base64

import cv2
import numpy as np

from saharapor.components.submissions.photos import compress_photo, decode_data_url


def _png_data_url(width, height):
    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[:, : width // 2] = (0, 128, 255)
    ok, encoded = cv2.imencode(".png", image)
    assert ok
    return "data:image/png;base64," + base64.b64encode(encoded.tobytes()).decode("ascii")


def test_settings_round_trip(crew_client) -> None:
    assert crew_client.get("/api/settings").get_json() == {"sheetUrl": ""}

    response = crew_client.put("/api/settings", json={"sheetUrl": "  https://script.google.com/macros/s/abc/exec "})
    assert response.get_json() == {"sheetUrl": "https://script.google.com/macros/s/abc/exec"}
    assert crew_client.get("/api/settings").get_json()["sheetUrl"].endswith("/exec")

    assert crew_client.put("/api/settings", json={"sheetUrl": ""}).get_json() == {"sheetUrl": ""}


def test_settings_rejects_non_http_urls(crew_client) -> None:
    assert crew_client.put("/api/settings", json={"sheetUrl": "ftp://example.com"}).status_code == 400
    assert crew_client.put("/api/settings", json={"sheetUrl": "not a url"}).status_code == 400
    assert crew_client.put("/api/settings", json={}).status_code == 400


def test_settings_are_per_crew(client) -> None:
    client.post("/api/session", json={"ekipKodu": "SAHA1"})
    client.put("/api/settings", json={"sheetUrl": "https://a.example.com/exec"})
    client.post("/api/session", json={"ekipKodu": "SAHA2"})

    assert client.get("/api/settings").get_json() == {"sheetUrl": ""}


def test_compress_photo_downscales_wide_images() -> None:
    compressed = compress_photo(_png_data_url(800, 600), max_width=400, quality=50)

    assert compressed.startswith("data:image/jpeg;base64,")
    image = decode_data_url(compressed)
    assert image.shape[1] == 400
    assert image.shape[0] == 300


def test_compress_photo_keeps_small_images_size() -> None:
    image = decode_data_url(compress_photo(_png_data_url(200, 100)))
    assert image.shape[:2] == (100, 200)


def test_compress_photo_passes_through_garbage() -> None:
    assert compress_photo("not a photo") == "not a photo"
    garbage = "data:image/jpeg;base64," + base64.b64encode(b"nope").decode()
    assert compress_photo(garbage) == garbage


def test_problem_photo_is_compressed_on_submit(crew_client) -> None:
    record = crew_client.post("/api/reports/problem", json={
        "hizmetNo": "1", "saha": "S", "kutu": "K", "aciklama": "A", "photo": _png_data_url(1200, 400),
    }).get_json()

    assert decode_data_url(record["photo"]).shape[1] == 400
