"""
In-memory activity log
Keeps the latest log records so the dashboard can show them without a log shipper
"""
import logging
import threading
from collections import deque
from datetime import datetime


class ActivityLogHandler(logging.Handler):
    """Logging handler that stores recent records in a bounded deque"""

    def __init__(self, max_entries=1000, level=logging.INFO):
        super().__init__(level=level)
        self.entries = deque(maxlen=max_entries)
        self._entries_lock = threading.Lock()

    def emit(self, record):
        try:
            entry = {
                'timestamp': datetime.fromtimestamp(record.created).isoformat(),
                'level': record.levelname,
                'logger': record.name,
                'message': record.getMessage(),
            }
        except Exception:
            self.handleError(record)
            return
        with self._entries_lock:
            self.entries.append(entry)

    def resize(self, max_entries):
        with self._entries_lock:
            self.entries = deque(self.entries, maxlen=max_entries)

    def clear(self):
        with self._entries_lock:
            self.entries.clear()

    def get_logs(self, level_filter='ALL', limit=50):
        """Get filtered logs, most recent last"""
        with self._entries_lock:
            logs = list(self.entries)

        if level_filter and level_filter != 'ALL':
            logs = [log for log in logs if log['level'] == level_filter]

        if limit and len(logs) > limit:
            logs = logs[-limit:]
        return logs


activity_log = ActivityLogHandler()


def install_activity_log(max_entries=1000, logger_name='saharapor'):
    """Attach the shared handler to the package logger once"""
    activity_log.resize(max_entries)
    logger = logging.getLogger(logger_name)
    if activity_log not in logger.handlers:
        logger.addHandler(activity_log)
    if logger.level == logging.NOTSET or logger.level > logging.INFO:
        logger.setLevel(logging.INFO)
    return activity_log
