"""
Session guards for crew and manager endpoints
"""
import hashlib
import hmac
from functools import wraps

from flask import jsonify, session

CREW_SESSION_KEY = 'ekipKodu'
MANAGER_SESSION_KEY = 'manager'


def current_team():
    return session.get(CREW_SESSION_KEY)


def crew_required(view):
    """Reject requests without a logged-in crew"""
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_team():
            return jsonify({'error': 'Ekip girişi gerekli'}), 401
        return view(*args, **kwargs)
    return wrapper


def manager_required(view):
    """Reject requests without a logged-in manager"""
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get(MANAGER_SESSION_KEY):
            return jsonify({'error': 'Yönetici girişi gerekli'}), 401
        return view(*args, **kwargs)
    return wrapper


def check_password(users, username, password):
    """Compare a password against the configured sha256 hash"""
    user = users.get(username or '', {})
    expected = user.get('password_hash')
    if not expected:
        return False
    given = hashlib.sha256((password or '').encode()).hexdigest()
    return hmac.compare_digest(given, expected)
