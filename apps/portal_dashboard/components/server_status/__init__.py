"""
Server Status Component
Game server and website availability
"""
from .routes import server_status_bp, init_server_status
from .service import ServerStatusService

__all__ = ['server_status_bp', 'init_server_status', 'ServerStatusService']
