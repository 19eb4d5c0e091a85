"""
Server Status Service
"""
from flask import current_app

from ...core.monitoring import STATUS_ONLINE


class ServerStatusService:
    """Service for Server Status component

    Reads from the ServerMonitor owned by the application.
    """

    @property
    def monitor(self):
        return current_app.extensions['server_monitor']

    def get_services_status(self):
        """Get all services status"""
        return self.monitor.get_services_status()

    def check_service_health(self, service_id):
        """Check one service directly

        Raises KeyError for a service that is not configured.
        """
        config = current_app.config['SERVICES'].get(service_id)
        if config is None:
            raise KeyError(service_id)

        status = self.monitor.check_service(service_id)
        result = {
            'service': service_id,
            'name': config['name'],
            'online': status == STATUS_ONLINE,
            'status': status,
        }
        if config.get('check') == 'http':
            result['url'] = config.get('health_url')
        else:
            result['host'] = config.get('host')
            result['port'] = config.get('port')
        return result

    def summary(self):
        """Counts of online services"""
        services = self.get_services_status()
        return {
            'online_services': sum(1 for s in services.values() if s['status'] == STATUS_ONLINE),
            'total_services': len(services),
        }
