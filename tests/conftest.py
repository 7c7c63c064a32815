"""Pytest configuration.

Every test gets an app whose workbook, photos and crew state live in tmp_path.
"""

import base64
import hashlib

import pytest

from saharapor.app import create_app
from saharapor.core import activity_log

MANAGER_PASSWORD = "test-password"


class FakeResponse:
    """Minimal stand-in for requests.Response"""

    def __init__(self, status_code=200, text="", json_data=None):
        self.status_code = status_code
        self.text = text
        self._json_data = json_data

    def json(self):
        if self._json_data is None:
            raise ValueError("No JSON body")
        return self._json_data


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test",
        "RATELIMIT_ENABLED": False,
        "DATA_DIR": str(tmp_path),
        "WORKBOOK_PATH": str(tmp_path / "saharapor.xlsx"),
        "PHOTO_DIR": str(tmp_path / "photos"),
        "CREW_STATE_DIR": str(tmp_path / "crews"),
        "PUBLIC_BASE_URL": "http://saha.test",
        "MANAGER_SHEET_URL": "http://sheet.test/exec",
        "MANAGER_USERS": {
            "yonetici": {
                "password_hash": hashlib.sha256(MANAGER_PASSWORD.encode()).hexdigest(),
                "role": "manager",
            },
        },
    })
    activity_log.clear()
    yield app
    activity_log.clear()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def crew_client(client):
    response = client.post("/api/session", json={"ekipKodu": "saha17550"})
    assert response.status_code == 200
    return client


@pytest.fixture
def manager_client(client):
    response = client.post(
        "/api/manager/login", json={"username": "yonetici", "password": MANAGER_PASSWORD}
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def sheet_store(app):
    return app.extensions["saharapor"]["sheet_store"]


@pytest.fixture
def crew_store(app):
    return app.extensions["saharapor"]["crew_store"]


@pytest.fixture
def jpeg_data_url():
    # smallest valid-looking payload; the sheet store never decodes the image
    return "data:image/jpeg;base64," + base64.b64encode(b"\xff\xd8\xff\xe0fake-jpeg").decode()
