"""
Account Component
"""
from .routes import account_bp, init_account
from .service import AccountService, current_portal_user

__all__ = ['account_bp', 'init_account', 'AccountService', 'current_portal_user']
