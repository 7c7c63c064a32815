"""
Sheet Settings Component
Per-crew sheet endpoint address
"""
from .routes import sheet_settings_bp
from .service import SheetSettingsService


def init_sheet_settings(app, crew_store):
    """Initialize Sheet Settings component with Flask app"""
    app.register_blueprint(sheet_settings_bp)
    return SheetSettingsService(crew_store)


__all__ = ['sheet_settings_bp', 'SheetSettingsService', 'init_sheet_settings']
