"""
Registration Routes
"""
import logging

from flask import Blueprint, current_app, jsonify, redirect, render_template, request, url_for
from flask_login import login_user

from .service import RegisterResponse, RegistrationService
from ...extensions import limiter
from ...models import Account

logger = logging.getLogger(__name__)

registration_bp = Blueprint(
    'registration',
    __name__,
    template_folder='templates',
)

service = RegistrationService()


def _register_limit():
    return current_app.config['RATELIMIT_REGISTER']


@registration_bp.route('/register', methods=['GET', 'POST'])
@limiter.limit(_register_limit, methods=['POST'])
def register():
    """Account creation form"""
    if request.method == 'GET':
        return render_template('register.html', message=None)

    code = service.register(
        request.form.get('username', ''),
        request.form.get('password', ''),
        request.form.get('email', ''),
        request.remote_addr or '0.0.0.0',
    )
    if code == RegisterResponse.REGISTER_SUCCESSFUL:
        account = Account.query.filter_by(username=request.form.get('username', '').strip()).first()
        if account is not None:
            login_user(account)
        return redirect(url_for('main.frontpage'))

    return render_template('register.html', message=RegisterResponse.message(code), code=code), 400


@registration_bp.route('/api/register', methods=['POST'])
@limiter.limit(_register_limit)
def api_register():
    """Create an account from a JSON body"""
    data = request.get_json(silent=True) or {}
    code = service.register(
        data.get('username', ''),
        data.get('password', ''),
        data.get('email', ''),
        request.remote_addr or '0.0.0.0',
    )
    status = 201 if code == RegisterResponse.REGISTER_SUCCESSFUL else 400
    return jsonify({'code': code, 'message': RegisterResponse.message(code)}), status


def init_registration(app):
    """Initialize registration component with Flask app"""
    app.register_blueprint(registration_bp)
    return registration_bp
