"""
Core services for portal components
"""
import threading
from collections import defaultdict, deque

# Global state - shared across all components
system_logs = deque()  # bounded by LogBufferHandler
service_metrics = defaultdict(lambda: {'status': 'Unknown', 'last_check': None, 'uptime': None})
metrics_lock = threading.Lock()

from .log_buffer import LogBufferHandler
from .monitoring import ServerMonitor, check_http, check_tcp

__all__ = [
    'ServerMonitor',
    'LogBufferHandler',
    'check_tcp',
    'check_http',
    'system_logs',
    'service_metrics',
    'metrics_lock',
]
