"""
Registration Component
Website account and game character creation
"""
from .routes import registration_bp, init_registration
from .service import RegisterResponse, RegistrationError, RegistrationService

__all__ = [
    'registration_bp',
    'init_registration',
    'RegisterResponse',
    'RegistrationError',
    'RegistrationService',
]
