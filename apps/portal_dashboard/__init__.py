"""
Game Portal Dashboard
"""
from .portal_app import PortalApp, create_app

__version__ = '1.0.0'

__all__ = ['PortalApp', 'create_app']
