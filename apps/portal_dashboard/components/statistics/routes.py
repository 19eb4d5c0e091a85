"""
Statistics Routes
Front page statistics fragment and its JSON counterpart
"""
import logging

from flask import Blueprint, jsonify

from .service import StatisticsService
from ..account.service import current_portal_user

logger = logging.getLogger(__name__)

# Create blueprint for statistics
statistics_bp = Blueprint(
    'statistics',
    __name__,
    template_folder='templates',
)

# Initialize service
service = StatisticsService()


@statistics_bp.route('/components/statistics')
def render_component():
    """Render the statistics panel HTML"""
    return service.render_panel(current_portal_user())


@statistics_bp.route('/api/statistics')
def api_statistics():
    """Get the values shown in the statistics panel"""
    try:
        stats = service.get_statistics(current_portal_user())
    except Exception as e:
        logger.exception(f'Failed to collect statistics: {e}')
        return jsonify({'error': str(e)}), 500

    return jsonify({
        'players_online': stats['players_online'],
        'server_status': stats['server_status'],
        'total_characters': stats['total_characters'],
        'registrations_today': stats['registrations_today'],
        'is_guest': stats['is_guest'],
    })


def init_statistics(app):
    """Initialize statistics component with Flask app"""
    app.register_blueprint(statistics_bp)

    # The fragment renders nothing outside an environment defining this guard
    app.jinja_env.globals['FORUM'] = True
    return statistics_bp
