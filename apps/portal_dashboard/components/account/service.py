"""
Account Service
Session user handling for guests and signed-in accounts
"""
import logging

from flask_login import current_user

from ...extensions import db
from ...models import Account

logger = logging.getLogger(__name__)


def current_portal_user():
    """The active user; PortalGuest for visitors without a session"""
    return current_user._get_current_object()


class AccountService:
    """Service for Account component"""

    def load_user(self, user_id):
        try:
            return db.session.get(Account, int(user_id))
        except (TypeError, ValueError):
            return None

    def authenticate(self, username, password):
        """Return the account when the credentials match, else None"""
        if not username or not password:
            return None

        account = Account.query.filter(db.func.lower(Account.username) == username.strip().lower()).first()
        if account is None or not account.check_password(password):
            logger.info(f'Failed login for {username!r}')
            return None
        return account
