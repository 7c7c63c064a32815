"""
Activity Logs Component
"""
from saharapor.components import registry
from saharapor.core import ActivityLogHandler, install_activity_log
from .routes import activity_logs_bp

registry.register_component('activity_logs', ActivityLogHandler)


def init_activity_logs(app):
    """Initialize Activity Logs component with Flask app"""
    handler = install_activity_log(app.config['MAX_LOG_ENTRIES'])
    app.register_blueprint(activity_logs_bp)
    return handler


__all__ = ['activity_logs_bp', 'init_activity_logs']
