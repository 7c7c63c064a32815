"""
SahaRapor configuration settings
"""
import os
import hashlib
from datetime import timedelta


def _env_int(name, default):
    try:
        return int(os.environ.get(name, default))
    except ValueError:
        return default


class SahaRaporConfig:
    """Centralized configuration for the field reporting service"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'change-me-in-production')
    PERMANENT_SESSION_LIFETIME = timedelta(hours=12)

    # Rate limiting
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')
    RATELIMIT_DEFAULT = os.environ.get('RATELIMIT_DEFAULT', '100 per minute')

    # Storage locations
    DATA_DIR = os.environ.get('SAHARAPOR_DATA_DIR', os.path.join(os.getcwd(), 'data'))
    WORKBOOK_PATH = os.environ.get('SAHARAPOR_WORKBOOK', os.path.join(DATA_DIR, 'saharapor.xlsx'))
    PHOTO_DIR = os.environ.get('SAHARAPOR_PHOTO_DIR', os.path.join(DATA_DIR, 'SahaRapor_Fotograflar'))
    CREW_STATE_DIR = os.environ.get('SAHARAPOR_CREW_DIR', os.path.join(DATA_DIR, 'crews'))

    # Public address the =IMAGE() formulas point at
    PUBLIC_BASE_URL = os.environ.get('SAHARAPOR_PUBLIC_URL', 'http://localhost:8090')

    # Spreadsheet timestamps are written in GMT+3
    SHEET_TIMEZONE_OFFSET_HOURS = _env_int('SAHARAPOR_SHEET_TZ_OFFSET', 3)

    # Photos
    PHOTO_MAX_WIDTH = 400
    PHOTO_JPEG_QUALITY = 50
    PHOTO_FALLBACK_LIMIT = 30000

    # Outgoing requests to the sheet endpoint
    FORWARD_TIMEOUT = _env_int('SAHARAPOR_FORWARD_TIMEOUT', 10)
    MANAGER_FETCH_TIMEOUT = _env_int('SAHARAPOR_MANAGER_TIMEOUT', 15)
    MANAGER_SHEET_URL = os.environ.get('SAHARAPOR_MANAGER_SHEET_URL', '')

    # Manager accounts for the dashboard
    MANAGER_USERS = {
        'yonetici': {
            'password_hash': hashlib.sha256(os.environ.get('SAHARAPOR_MANAGER_PASSWORD', 'yonetici').encode()).hexdigest(),
            'role': 'manager',
        },
    }

    # Activity log
    MAX_LOG_ENTRIES = 1000

    # Server
    HOST = os.environ.get('SAHARAPOR_HOST', '0.0.0.0')
    PORT = _env_int('SAHARAPOR_PORT', 8090)

