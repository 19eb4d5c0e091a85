"""
Portal configuration settings
"""
import os
from datetime import timedelta


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class PortalConfig:
    """Centralized configuration for the game portal"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-here-change-in-production')
    PERMANENT_SESSION_LIFETIME = timedelta(hours=8)

    # Database shared with the game server
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///portal.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Rate limiting
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = "100 per minute"
    RATELIMIT_REGISTER = "10 per hour"

    # Game server
    GAME_SERVER_HOST = os.environ.get('GAME_SERVER_HOST', '127.0.0.1')
    GAME_SERVER_PORT = int(os.environ.get('GAME_SERVER_PORT', 53595))
    STATUS_CHECK_TIMEOUT = float(os.environ.get('STATUS_CHECK_TIMEOUT', 1.5))
    STATUS_POLL_INTERVAL = float(os.environ.get('STATUS_POLL_INTERVAL', 15))
    MONITOR_AUTO_START = _env_flag('MONITOR_AUTO_START', True)

    # Monitored services (tcp checks connect to host/port, http checks expect a 200)
    SERVICES = {
        'game_server': {
            'name': 'Game Server',
            'description': 'World server',
            'check': 'tcp',
            'host': GAME_SERVER_HOST,
            'port': GAME_SERVER_PORT,
        },
        'website': {
            'name': 'Website',
            'description': 'Portal front end',
            'check': 'http',
            'health_url': os.environ.get('WEBSITE_HEALTH_URL', 'http://localhost:8080/api/statistics'),
        },
    }

    # Front page links
    DISCORD_INVITE_URL = os.environ.get('DISCORD_INVITE_URL', 'https://discord.gg/YB6mfUu')

    # Registration rules
    CHAR_NAME_CAN_CONTAIN_MOD = _env_flag('CHAR_NAME_CAN_CONTAIN_MOD', False)
    WANT_EMAIL = _env_flag('WANT_EMAIL', False)
    WANT_REGISTRATION_LIMIT = _env_flag('WANT_REGISTRATION_LIMIT', True)
    REGISTRATION_LIMIT_SECONDS = int(os.environ.get('REGISTRATION_LIMIT_SECONDS', 60 * 60))

    # UI settings
    MAX_LOG_ENTRIES = 1000


class TestingConfig(PortalConfig):
    """Configuration used by the test suite"""

    TESTING = True
    SECRET_KEY = 'testing'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    RATELIMIT_ENABLED = False
    MONITOR_AUTO_START = False
    STATUS_CHECK_TIMEOUT = 0.2
