"""
Mirrors log records into the in-memory system log buffer
"""
import logging
from datetime import datetime


class LogBufferHandler(logging.Handler):
    """Logging handler appending entries to a shared deque

    The oldest entries are dropped once the buffer holds more than
    ``capacity`` items.
    """

    def __init__(self, buffer, capacity, level=logging.INFO):
        super().__init__(level)
        self.buffer = buffer
        self.capacity = capacity

    def set_capacity(self, capacity):
        self.acquire()
        try:
            self.capacity = capacity
            self._trim()
        finally:
            self.release()

    def _trim(self):
        while len(self.buffer) > self.capacity:
            self.buffer.popleft()

    def emit(self, record):
        try:
            self.buffer.append({
                'timestamp': datetime.fromtimestamp(record.created).isoformat(),
                'level': record.levelname,
                'logger': record.name,
                'message': record.getMessage(),
            })
            self._trim()
        except Exception:
            self.handleError(record)
