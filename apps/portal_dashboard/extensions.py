"""
Flask extensions

Created here and bound to the application in PortalApp.create_app().
"""
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_login import LoginManager
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
login_manager = LoginManager()

# Limits come from RATELIMIT_* settings
limiter = Limiter(key_func=get_remote_address)
