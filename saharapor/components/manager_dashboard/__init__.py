"""
Manager Dashboard Component
"""
from .routes import manager_dashboard_bp
from .service import ManagerDashboardService


def init_manager_dashboard(app):
    """Initialize Manager Dashboard component with Flask app"""
    app.register_blueprint(manager_dashboard_bp)
    return ManagerDashboardService(timeout=app.config['MANAGER_FETCH_TIMEOUT'])


__all__ = ['manager_dashboard_bp', 'ManagerDashboardService', 'init_manager_dashboard']
