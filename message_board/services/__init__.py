from .message_log import EMPTY_MESSAGE, NO_MESSAGES, LogEntry, MessageLog, StorageError
from .request_counter import RequestCounter

__all__ = [
    "EMPTY_MESSAGE",
    "NO_MESSAGES",
    "LogEntry",
    "MessageLog",
    "RequestCounter",
    "StorageError",
]
