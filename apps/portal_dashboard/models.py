"""
Database models shared by the website and the game server
"""
import time

from flask_login import AnonymousUserMixin, UserMixin
from werkzeug.security import check_password_hash, generate_password_hash

from .extensions import db


def _now():
    return int(time.time())


class Account(UserMixin, db.Model):
    """Website account (forum user)"""

    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(12), unique=True, nullable=False, index=True)
    email = db.Column(db.String(255), nullable=False, default='')
    password_hash = db.Column(db.String(255), nullable=False)
    registered = db.Column(db.Integer, nullable=False, default=_now, index=True)
    registration_ip = db.Column(db.String(64), nullable=False, default='0.0.0.0')

    is_guest = False

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<Account {self.username}>'


class PortalGuest(AnonymousUserMixin):
    """Visitor without an authenticated account"""

    is_guest = True
    username = 'Guest'


class Character(db.Model):
    """Game character as stored by the game server"""

    __tablename__ = 'players'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(12), unique=True, nullable=False, index=True)
    email = db.Column(db.String(255), nullable=False, default='')
    pass_hash = db.Column(db.String(255), nullable=False)
    creation_date = db.Column(db.Integer, nullable=False, default=_now)
    creation_ip = db.Column(db.String(64), nullable=False, default='0.0.0.0', index=True)
    online = db.Column(db.Boolean, nullable=False, default=False, index=True)

    def __repr__(self):
        return f'<Character {self.username}>'
