"""
Game Portal Dashboard
Flask application serving the portal front page and its components
"""
import logging
import os

from flask import Flask

from .config.settings import PortalConfig
from .core import LogBufferHandler, ServerMonitor, system_logs
from .extensions import db, limiter
from .routes.main_routes import main_bp

from .components.statistics import init_statistics
from .components.server_status import init_server_status
from .components.registration import init_registration
from .components.account import init_account
from .components.system_logs import init_system_logs

logger = logging.getLogger(__name__)


def _install_log_buffer(capacity):
    package_logger = logging.getLogger(__package__)
    package_logger.setLevel(logging.INFO)
    for handler in package_logger.handlers:
        if isinstance(handler, LogBufferHandler):
            handler.set_capacity(capacity)
            return handler
    handler = LogBufferHandler(system_logs, capacity)
    package_logger.addHandler(handler)
    return handler


class PortalApp:
    """Main portal application class"""

    def __init__(self):
        self.app = None
        self.monitor = None

    def create_app(self, config_object=PortalConfig):
        """Create and configure Flask application"""
        base_dir = os.path.dirname(os.path.abspath(__file__))
        self.app = Flask(
            __name__,
            template_folder=os.path.join(base_dir, 'templates'),
            static_folder=os.path.join(base_dir, 'static'),
        )

        # Load configuration
        self.app.config.from_object(config_object)

        # Initialize extensions
        db.init_app(self.app)
        limiter.init_app(self.app)
        _install_log_buffer(self.app.config['MAX_LOG_ENTRIES'])

        # Initialize monitoring
        self.monitor = ServerMonitor(
            self.app.config['SERVICES'],
            timeout=self.app.config['STATUS_CHECK_TIMEOUT'],
            interval=self.app.config['STATUS_POLL_INTERVAL'],
        )
        self.app.extensions['server_monitor'] = self.monitor

        # Initialize components
        init_account(self.app)
        init_statistics(self.app)
        init_server_status(self.app)
        init_registration(self.app)
        init_system_logs(self.app)

        # Register main blueprint
        self.app.register_blueprint(main_bp)

        with self.app.app_context():
            db.create_all()

        return self.app

    def run(self, host='0.0.0.0', port=8080):
        """Start the portal application"""
        if self.app.config['MONITOR_AUTO_START']:
            self.monitor.start()

        logger.info('=' * 60)
        logger.info('Game Portal Dashboard')
        logger.info(f'Starting on: http://localhost:{port}')
        logger.info(f'   - Front page:  http://localhost:{port}/')
        logger.info(f'   - Statistics:  http://localhost:{port}/api/statistics')
        logger.info(f'   - Services:    http://localhost:{port}/api/services/status')
        logger.info(f"Game server: {self.app.config['GAME_SERVER_HOST']}:{self.app.config['GAME_SERVER_PORT']}")
        logger.info('=' * 60)

        try:
            self.app.run(host=host, port=port, debug=False)
        finally:
            self.monitor.stop()


def create_app(config_object=PortalConfig):
    """Application factory"""
    return PortalApp().create_app(config_object)


def main():
    """Main entry point"""
    logging.basicConfig(level=logging.INFO)
    portal = PortalApp()
    portal.create_app()
    portal.run(port=int(os.environ.get('PORTAL_PORT', 8080)))


if __name__ == '__main__':
    main()
