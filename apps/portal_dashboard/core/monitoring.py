"""
Server monitoring service
"""
import logging
import socket
import threading
import time
from datetime import datetime

import requests

logger = logging.getLogger(__name__)

STATUS_ONLINE = 'Online'
STATUS_OFFLINE = 'Offline'
STATUS_UNKNOWN = 'Unknown'


def check_tcp(host, port, timeout=1.5):
    """Return True when a TCP connection to host:port can be opened"""
    try:
        port = int(port)
    except (TypeError, ValueError):
        return False
    if not 0 < port < 65536 or not host:
        return False

    try:
        with socket.create_connection((host, port), timeout=timeout):
            return True
    except OSError as e:
        logger.debug(f'TCP check {host}:{port} failed: {e}')
        return False


def check_http(url, timeout=1.5):
    """Return True when url answers with HTTP 200"""
    try:
        response = requests.get(url, timeout=timeout)
        return response.status_code == 200
    except requests.exceptions.RequestException as e:
        logger.debug(f'HTTP check {url} failed: {e}')
        return False


class ServerMonitor:
    """Polls the configured services from a daemon thread"""

    def __init__(self, services, timeout=1.5, interval=15):
        self.services = services
        self.timeout = timeout
        self.interval = interval
        self.running = False
        self.thread = None

    def start(self):
        """Start monitoring thread"""
        if self.thread is None or not self.thread.is_alive():
            self.running = True
            self.thread = threading.Thread(target=self._monitor_loop, daemon=True)
            self.thread.start()
            logger.info(f'Server monitor started ({len(self.services)} services, every {self.interval}s)')

    def stop(self):
        """Stop monitoring thread"""
        self.running = False
        if self.thread:
            self.thread.join(timeout=2)
            self.thread = None

    def _monitor_loop(self):
        while self.running:
            try:
                self.check_all_services()
            except Exception as e:
                logger.error(f'Monitor loop error: {e}')
            time.sleep(self.interval)

    def check_all_services(self):
        """Check every configured service and record the results"""
        for service_id in self.services:
            self.check_service(service_id)

    def check_service(self, service_id):
        """Check one service directly and record the result"""
        config = self.services.get(service_id)
        if not config:
            return STATUS_UNKNOWN

        if config.get('check') == 'http':
            online = check_http(config.get('health_url', ''), self.timeout)
        else:
            online = check_tcp(config.get('host'), config.get('port'), self.timeout)

        status = STATUS_ONLINE if online else STATUS_OFFLINE
        self._record(service_id, status)
        return status

    def _record(self, service_id, status):
        from . import metrics_lock, service_metrics

        now = datetime.now()
        with metrics_lock:
            metrics = service_metrics[service_id]
            old_status = metrics['status']
            metrics['status'] = status
            metrics['last_check'] = now
            if status == STATUS_ONLINE:
                if metrics['uptime'] is None:
                    metrics['uptime'] = now
            else:
                metrics['uptime'] = None

        if status != old_status:
            level = logging.INFO if status == STATUS_ONLINE else logging.WARNING
            logger.log(level, f'Service {service_id} status changed: {old_status} -> {status}')

    def get_services_status(self):
        """Get current status of every service"""
        from . import metrics_lock, service_metrics

        services_data = {}
        for service_id, config in self.services.items():
            status = self.get_status(service_id)

            with metrics_lock:
                metrics = dict(service_metrics[service_id])

            services_data[service_id] = {
                'name': config['name'],
                'description': config.get('description', ''),
                'status': status,
                'last_check': metrics['last_check'].isoformat() if metrics['last_check'] else None,
                'uptime_seconds': self._calculate_uptime_seconds(metrics),
            }
        return services_data

    def get_status(self, service_id):
        """Status of a service, from the cache while the monitor keeps it fresh"""
        from . import metrics_lock, service_metrics

        with metrics_lock:
            metrics = dict(service_metrics[service_id]) if service_id in service_metrics else None
        if metrics and metrics['status'] != STATUS_UNKNOWN and self.is_fresh(metrics):
            return metrics['status']
        return self.check_service(service_id)

    def is_fresh(self, metrics):
        """True when the polling thread runs and checked within one interval"""
        last_check = metrics.get('last_check')
        if not self.running or last_check is None:
            return False
        return (datetime.now() - last_check).total_seconds() < self.interval

    @staticmethod
    def _calculate_uptime_seconds(metrics):
        if metrics['status'] != STATUS_ONLINE or not metrics.get('uptime'):
            return 0
        return int((datetime.now() - metrics['uptime']).total_seconds())
