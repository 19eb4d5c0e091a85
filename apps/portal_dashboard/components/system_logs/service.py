"""
System Logs Service
"""


class SystemLogsService:
    """Service for System Logs component

    Reads the buffer filled by LogBufferHandler.
    """

    def get_logs(self, level_filter='ALL', limit=50):
        """Get system logs with filtering"""
        from ...core import system_logs

        logs = list(system_logs)

        if level_filter != 'ALL':
            logs = [log for log in logs if log.get('level') == level_filter]

        # Most recent entries
        if limit and len(logs) > limit:
            logs = logs[-limit:]

        return logs
