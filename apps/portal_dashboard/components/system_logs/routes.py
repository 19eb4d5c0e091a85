"""
System Logs Component Routes
"""
from flask import Blueprint, jsonify, request

from .service import SystemLogsService

system_logs_bp = Blueprint('system_logs', __name__)

service = SystemLogsService()


@system_logs_bp.route('/api/logs')
def api_logs():
    """Get system logs with filtering"""
    level_filter = request.args.get('level', 'ALL').upper()
    try:
        limit = int(request.args.get('limit', 50))
    except ValueError:
        return jsonify({'error': 'limit must be an integer'}), 400

    return jsonify(service.get_logs(level_filter=level_filter, limit=max(limit, 0)))
