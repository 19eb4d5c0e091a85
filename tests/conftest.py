import time
from datetime import datetime

import pytest

from portal_dashboard import create_app
from portal_dashboard.config.settings import TestingConfig
from portal_dashboard.core import service_metrics, system_logs
from portal_dashboard.extensions import db as _db
from portal_dashboard.models import Account, Character


@pytest.fixture
def app():
    """Create application for the tests."""
    service_metrics.clear()
    system_logs.clear()

    app = create_app(TestingConfig)
    with app.app_context():
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def make_character(app):
    """Insert a game character."""
    def _make(username, online=False, creation_date=None, creation_ip='10.0.0.1'):
        character = Character(
            username=username,
            pass_hash='x',
            online=online,
            creation_date=creation_date or int(time.time()),
            creation_ip=creation_ip,
        )
        _db.session.add(character)
        _db.session.commit()
        return character
    return _make


@pytest.fixture
def make_account(app):
    """Insert a website account."""
    def _make(username, password='secret', registered=None):
        account = Account(username=username, registered=registered or int(time.time()))
        account.set_password(password)
        _db.session.add(account)
        _db.session.commit()
        return account
    return _make


@pytest.fixture
def game_server_status(app):
    """Pin the game server status as freshly polled by a running monitor."""
    def _set(status):
        app.extensions['server_monitor'].running = True
        service_metrics['game_server']['status'] = status
        service_metrics['game_server']['last_check'] = datetime.now()
    return _set
