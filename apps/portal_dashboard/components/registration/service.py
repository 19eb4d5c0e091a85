"""
Registration Service
Creates a website account and its game character
"""
import logging
import time

from email_validator import EmailNotValidError, validate_email
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.security import generate_password_hash

from ...extensions import db
from ...models import Account, Character

logger = logging.getLogger(__name__)


class RegisterResponse:
    """Response codes understood by the game client"""

    REGISTER_SUCCESSFUL = 0
    USERNAME_TAKEN = 2
    REGISTERED_RECENTLY = 5
    INVALID_DETAILS = 6
    USERNAME_LENGTH = 7
    INVALID_CREDENTIALS = 8

    MESSAGES = {
        REGISTER_SUCCESSFUL: 'Registration successful',
        USERNAME_TAKEN: 'Username already in use',
        REGISTERED_RECENTLY: 'You have registered recently, please try again later',
        INVALID_DETAILS: 'Invalid email address or account details',
        USERNAME_LENGTH: 'Username must be between 2 and 12 characters',
        INVALID_CREDENTIALS: 'Username or password not allowed',
    }

    @classmethod
    def message(cls, code):
        return cls.MESSAGES.get(code, 'Registration failed')


class RegistrationError(ValueError):
    """Registration refused with a RegisterResponse code"""

    def __init__(self, code, message=None):
        super().__init__(message or RegisterResponse.message(code))
        self.code = code


class RegistrationService:
    """Service for the Registration component"""

    MIN_USERNAME = 2
    MAX_USERNAME = 12
    MIN_PASSWORD = 4
    MAX_PASSWORD = 64

    def validate(self, username, password, email='', ip_address='0.0.0.0'):
        """Check a registration request, raising RegistrationError on refusal

        Checks run in the same order as the game server's.
        """
        config = current_app.config

        if len(username) < self.MIN_USERNAME or len(username) > self.MAX_USERNAME:
            raise RegistrationError(RegisterResponse.USERNAME_LENGTH)

        lowered = username.lower()
        if not config['CHAR_NAME_CAN_CONTAIN_MOD'] and (lowered.startswith('mod') or lowered.startswith('m0d')):
            raise RegistrationError(RegisterResponse.INVALID_CREDENTIALS)

        if len(password) < self.MIN_PASSWORD or len(password) > self.MAX_PASSWORD:
            raise RegistrationError(RegisterResponse.INVALID_CREDENTIALS)

        if config['WANT_EMAIL']:
            try:
                validate_email(email, check_deliverability=False)
            except EmailNotValidError:
                raise RegistrationError(RegisterResponse.INVALID_DETAILS)

        if config['WANT_REGISTRATION_LIMIT'] and self.recently_registered(ip_address):
            logger.info(f'{ip_address} - Registration failed: Registered recently.')
            raise RegistrationError(RegisterResponse.REGISTERED_RECENTLY)

        if self.player_exists(username):
            logger.info(f'{ip_address} - Registration failed: Username already in use.')
            raise RegistrationError(RegisterResponse.USERNAME_TAKEN)

    def register(self, username, password, email='', ip_address='0.0.0.0'):
        """Register a new account and character, returning a RegisterResponse code"""
        username = (username or '').strip()
        password = password or ''
        email = (email or '').strip()

        try:
            self.validate(username, password, email, ip_address)
            self.create_player(username, password, email, ip_address)
        except RegistrationError as e:
            return e.code
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception(f'{ip_address} - Registration failed: {e}')
            return RegisterResponse.REGISTERED_RECENTLY

        logger.info(f'{ip_address} - Registration successful')
        return RegisterResponse.REGISTER_SUCCESSFUL

    def recently_registered(self, ip_address):
        """True when ip_address created a character within the limit window"""
        cutoff = int(time.time()) - current_app.config['REGISTRATION_LIMIT_SECONDS']
        query = Character.query.filter(
            Character.creation_ip == ip_address,
            Character.creation_date > cutoff,
        )
        return db.session.query(query.exists()).scalar()

    def player_exists(self, username):
        """True when a character or a website account already uses username"""
        lowered = username.lower()
        for model in (Character, Account):
            query = model.query.filter(db.func.lower(model.username) == lowered)
            if db.session.query(query.exists()).scalar():
                return True
        return False

    def create_player(self, username, password, email, ip_address):
        """Insert the account and character rows in one transaction"""
        now = int(time.time())
        pass_hash = generate_password_hash(password)

        account = Account(
            username=username,
            email=email,
            password_hash=pass_hash,
            registered=now,
            registration_ip=ip_address,
        )
        character = Character(
            username=username,
            email=email,
            pass_hash=pass_hash,
            creation_date=now,
            creation_ip=ip_address,
        )
        db.session.add(account)
        db.session.add(character)
        db.session.commit()
        return character
