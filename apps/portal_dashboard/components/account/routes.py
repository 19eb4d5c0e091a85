"""
Account Routes
"""
from flask import Blueprint, redirect, request, url_for
from flask_login import login_user, logout_user

from .service import AccountService
from ...extensions import login_manager
from ...models import PortalGuest

account_bp = Blueprint('account', __name__)

service = AccountService()


@account_bp.route('/login', methods=['POST'])
def login():
    """Sign in from the front page form"""
    account = service.authenticate(request.form.get('username', ''), request.form.get('password', ''))
    if account is None:
        return redirect(url_for('main.frontpage', login_failed=1))

    login_user(account, remember=bool(request.form.get('remember')))
    return redirect(url_for('main.frontpage'))


@account_bp.route('/logout')
def logout():
    logout_user()
    return redirect(url_for('main.frontpage'))


def init_account(app):
    """Initialize account component with Flask app"""
    login_manager.init_app(app)
    login_manager.anonymous_user = PortalGuest
    login_manager.user_loader(service.load_user)

    app.register_blueprint(account_bp)
    return account_bp
