"""
Sheet Backend Component
Spreadsheet-backed store that crews post records to and managers read from
"""
from .routes import sheet_backend_bp
from .service import SheetStore
from .photo_storage import PhotoStorage
from .layouts import SHEET_LAYOUTS, build_row, format_location


def init_sheet_backend(app):
    """Initialize Sheet Backend component with Flask app"""
    photo_storage = PhotoStorage(
        app.config['PHOTO_DIR'],
        app.config['PUBLIC_BASE_URL'],
        fallback_limit=app.config['PHOTO_FALLBACK_LIMIT'],
    )
    store = SheetStore(
        app.config['WORKBOOK_PATH'],
        photo_storage,
        tz_offset_hours=app.config['SHEET_TIMEZONE_OFFSET_HOURS'],
    )
    app.register_blueprint(sheet_backend_bp)
    return store


__all__ = [
    'sheet_backend_bp', 'SheetStore', 'PhotoStorage', 'SHEET_LAYOUTS',
    'build_row', 'format_location', 'init_sheet_backend',
]
