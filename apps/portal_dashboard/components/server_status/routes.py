"""
Server Status Routes
"""
import logging

from flask import Blueprint, jsonify

from .service import ServerStatusService

logger = logging.getLogger(__name__)

server_status_bp = Blueprint('server_status', __name__)

service = ServerStatusService()


@server_status_bp.route('/api/services/status')
def api_services_status():
    """Get all services status"""
    return jsonify(service.get_services_status())


@server_status_bp.route('/api/services/summary')
def api_services_summary():
    """Get online/total service counts"""
    return jsonify(service.summary())


@server_status_bp.route('/api/services/<service_id>/health', methods=['GET'])
def api_service_health(service_id):
    """Check service health status directly"""
    try:
        return jsonify(service.check_service_health(service_id))
    except KeyError:
        return jsonify({'online': False, 'error': f'Unknown service: {service_id}'}), 404
    except Exception as e:
        logger.error(f'Health check failed for {service_id}: {e}')
        return jsonify({'online': False, 'error': str(e)}), 500


def init_server_status(app):
    """Initialize server status component with Flask app"""
    app.register_blueprint(server_status_bp)
    return server_status_bp
