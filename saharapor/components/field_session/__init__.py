"""
Field Session Component
"""
from .routes import field_session_bp


def init_field_session(app):
    """Initialize Field Session component with Flask app"""
    app.register_blueprint(field_session_bp)
    return field_session_bp


__all__ = ['field_session_bp', 'init_field_session']
