from identityref.internal.logging import LogLevel, StructuredLogger, get_logger

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "get_logger",
]
