import json
import sys
import threading
from enum import IntEnum

from identityref.utils.timestamp import format_timestamp


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def parse(cls, name):
        if isinstance(name, LogLevel):
            return name
        key = str(name).strip().upper()
        if key == "WARNING":
            key = "WARN"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown log level: {name!r}") from None

_logger = None
_logger_lock = threading.Lock()

class StructuredLogger:
    def __init__(self, level=LogLevel.INFO):
        self.level = level

    def is_enabled(self, level):
        return level >= self.level

    def _emit(self, level, message, /, error=None, **kwargs):
        if level < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": level.name, "msg": message, **kwargs}
            if error:
                record["err"] = str(error)
            print(json.dumps(record, default=str), file=sys.stderr, flush=True)
        except (OSError, ValueError):
            pass

    def debug(self, message, /, **kwargs):
        self._emit(LogLevel.DEBUG, message, **kwargs)

    def info(self, message, /, **kwargs):
        self._emit(LogLevel.INFO, message, **kwargs)

    def warn(self, message, /, error=None, **kwargs):
        self._emit(LogLevel.WARN, message, error, **kwargs)

    def error(self, message, /, error=None, **kwargs):
        self._emit(LogLevel.ERROR, message, error, **kwargs)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO):
        global _logger
        with _logger_lock:
            _logger = cls(LogLevel.parse(min_level))
        return _logger

def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger
