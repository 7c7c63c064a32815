"""
Submissions Component
Crew form submission, forwarding to the sheet endpoint and local history
"""
from .routes import submissions_bp
from .service import SubmissionService
from .forwarder import SheetForwarder
from .photos import compress_photo


def init_submissions(app, crew_store):
    """Initialize Submissions component with Flask app"""
    service = SubmissionService(
        crew_store,
        SheetForwarder(timeout=app.config['FORWARD_TIMEOUT']),
        photo_max_width=app.config['PHOTO_MAX_WIDTH'],
        photo_quality=app.config['PHOTO_JPEG_QUALITY'],
    )
    app.register_blueprint(submissions_bp)
    return service


__all__ = ['submissions_bp', 'SubmissionService', 'SheetForwarder', 'compress_photo', 'init_submissions']
