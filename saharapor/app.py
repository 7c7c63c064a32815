"""
SahaRapor field reporting service
Flask application assembled from feature components
"""
import logging
import os

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from saharapor.config.settings import SahaRaporConfig
from saharapor.core import EXTENSION_KEY, CrewStore
from saharapor.routes.main_routes import main_bp

from saharapor.components.activity_logs import init_activity_logs
from saharapor.components.field_session import init_field_session
from saharapor.components.sheet_backend import init_sheet_backend
from saharapor.components.sheet_settings import init_sheet_settings
from saharapor.components.submissions import init_submissions
from saharapor.components.manager_dashboard import init_manager_dashboard

logger = logging.getLogger(__name__)


class SahaRaporApp:
    """Main application class"""

    def __init__(self, config_overrides=None):
        self.app = None
        self.config_overrides = config_overrides or {}

    def create_app(self):
        """Create and configure Flask application"""
        self.app = Flask(__name__)

        # Load configuration
        self.app.config.from_object(SahaRaporConfig)
        self.app.config.update(self.config_overrides)
        self.app.json.ensure_ascii = False

        Limiter(
            key_func=get_remote_address,
            app=self.app,
            default_limits=[self.app.config['RATELIMIT_DEFAULT']],
            storage_uri=self.app.config['RATELIMIT_STORAGE_URI'],
        )

        crew_store = CrewStore(self.app.config['CREW_STATE_DIR'])

        # Initialize components
        services = {
            'activity_logs': init_activity_logs(self.app),
            'crew_store': crew_store,
            'sheet_store': init_sheet_backend(self.app),
            'sheet_settings': init_sheet_settings(self.app, crew_store),
            'submissions': init_submissions(self.app, crew_store),
            'manager_dashboard': init_manager_dashboard(self.app),
        }
        init_field_session(self.app)
        self.app.extensions[EXTENSION_KEY] = services

        self.app.register_blueprint(main_bp)
        return self.app

    def run(self):
        """Start the application"""
        host = self.app.config['HOST']
        port = self.app.config['PORT']
        os.makedirs(self.app.config['DATA_DIR'], exist_ok=True)

        logger.info('=' * 60)
        logger.info('SahaRapor field reporting service')
        logger.info(f'Starting on: http://{host}:{port}')
        logger.info(f"Workbook:    {self.app.config['WORKBOOK_PATH']}")
        logger.info(f"Crew data:   {self.app.config['CREW_STATE_DIR']}")
        logger.info('=' * 60)

        self.app.run(host=host, port=port, debug=False)


def create_app(config_overrides=None):
    """App factory for WSGI servers and tests"""
    return SahaRaporApp(config_overrides).create_app()


def main():
    """Main entry point"""
    logging.basicConfig(level=logging.INFO,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    service = SahaRaporApp()
    service.create_app()
    service.run()


if __name__ == '__main__':
    main()
