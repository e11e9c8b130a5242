from .binding import attach_error_log
from .logging_error_log import LoggingErrorLog
from .memory_error_log import InMemoryErrorLog

__all__ = ["attach_error_log", "LoggingErrorLog", "InMemoryErrorLog"]
