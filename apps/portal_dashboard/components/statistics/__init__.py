"""
Statistics Component
Players online, server status, character and registration counts
"""

from .routes import statistics_bp, init_statistics
from .service import StatisticsService

__all__ = ['statistics_bp', 'init_statistics', 'StatisticsService']
