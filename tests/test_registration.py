"""
Tests for account and character registration
"""
import time
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from portal_dashboard.components.registration.service import (
    RegisterResponse,
    RegistrationError,
    RegistrationService,
)
from portal_dashboard.models import Account, Character


@pytest.fixture
def service(app):
    return RegistrationService()


class TestValidation:
    """Rules applied before anything is written"""

    @pytest.mark.parametrize('username', ['a', 'abcdefghijklm', ''])
    def test_username_length(self, service, username):
        assert service.register(username, 'password', ip_address='1.1.1.1') == RegisterResponse.USERNAME_LENGTH

    @pytest.mark.parametrize('username', ['Modbob', 'mod', 'M0dder'])
    def test_mod_prefix_refused(self, service, username):
        assert service.register(username, 'password', ip_address='1.1.1.1') == RegisterResponse.INVALID_CREDENTIALS

    def test_mod_prefix_allowed_by_config(self, app, service):
        app.config['CHAR_NAME_CAN_CONTAIN_MOD'] = True

        assert service.register('Modbob', 'password', ip_address='1.1.1.1') == RegisterResponse.REGISTER_SUCCESSFUL

    @pytest.mark.parametrize('password', ['abc', 'x' * 65])
    def test_password_length(self, service, password):
        assert service.register('alice', password, ip_address='1.1.1.1') == RegisterResponse.INVALID_CREDENTIALS

    def test_email_checked_when_wanted(self, app, service):
        app.config['WANT_EMAIL'] = True

        assert service.register('alice', 'password', 'not-an-email', '1.1.1.1') == RegisterResponse.INVALID_DETAILS
        assert service.register('alice', 'password', 'alice@gmail.com', '1.1.1.1') == RegisterResponse.REGISTER_SUCCESSFUL

    def test_email_ignored_when_not_wanted(self, service):
        assert service.register('alice', 'password', 'not-an-email', '1.1.1.1') == RegisterResponse.REGISTER_SUCCESSFUL

    def test_validate_raises_with_code(self, service):
        with pytest.raises(RegistrationError) as exc_info:
            service.validate('a', 'password')

        assert exc_info.value.code == RegisterResponse.USERNAME_LENGTH
        assert 'between 2 and 12' in str(exc_info.value)


class TestLimits:
    """Duplicate names and per-IP limit"""

    def test_username_taken(self, service, make_character):
        make_character('Alice', creation_date=int(time.time()) - 10 * 24 * 3600)

        assert service.register('alice', 'password', ip_address='2.2.2.2') == RegisterResponse.USERNAME_TAKEN

    def test_username_taken_by_account_without_character(self, service, make_account):
        make_account('Alice')

        assert service.register('alice', 'password', ip_address='9.9.9.9') == RegisterResponse.USERNAME_TAKEN
        assert Character.query.count() == 0

    def test_recent_registration_from_same_ip(self, service):
        assert service.register('alice', 'password', ip_address='3.3.3.3') == RegisterResponse.REGISTER_SUCCESSFUL
        assert service.register('bob', 'password', ip_address='3.3.3.3') == RegisterResponse.REGISTERED_RECENTLY
        assert service.register('bob', 'password', ip_address='4.4.4.4') == RegisterResponse.REGISTER_SUCCESSFUL

    def test_old_registration_does_not_limit(self, service, make_character):
        make_character('alice', creation_date=int(time.time()) - 2 * 3600, creation_ip='5.5.5.5')

        assert service.register('bob', 'password', ip_address='5.5.5.5') == RegisterResponse.REGISTER_SUCCESSFUL

    def test_limit_disabled(self, app, service):
        app.config['WANT_REGISTRATION_LIMIT'] = False

        assert service.register('alice', 'password', ip_address='6.6.6.6') == RegisterResponse.REGISTER_SUCCESSFUL
        assert service.register('bob', 'password', ip_address='6.6.6.6') == RegisterResponse.REGISTER_SUCCESSFUL


class TestCreation:
    """Rows written on success"""

    def test_creates_account_and_character(self, service):
        assert service.register(' alice ', 'password', ip_address='7.7.7.7') == RegisterResponse.REGISTER_SUCCESSFUL

        account = Account.query.filter_by(username='alice').one()
        character = Character.query.filter_by(username='alice').one()
        assert account.check_password('password')
        assert account.registration_ip == '7.7.7.7'
        assert character.creation_ip == '7.7.7.7'
        assert character.online is False
        assert character.pass_hash != 'password'

    def test_database_failure(self, service):
        error = OperationalError('INSERT', {}, Exception('locked'))
        with patch.object(RegistrationService, 'create_player', side_effect=error):
            assert service.register('alice', 'password', ip_address='8.8.8.8') == RegisterResponse.REGISTERED_RECENTLY

        assert Character.query.count() == 0

    def test_messages(self):
        assert RegisterResponse.message(RegisterResponse.REGISTER_SUCCESSFUL) == 'Registration successful'
        assert RegisterResponse.message(99) == 'Registration failed'
