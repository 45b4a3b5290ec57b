"""
Service-level exception classes.

The engine hierarchy lives in :mod:`Gloss.errors`; these extend it for the
persistence layer around the dictionary.
"""

from typing import Optional

from Gloss.errors import ConfigurationError, DictionaryError, GlossError


class DatabaseError(GlossError):
    """Raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        super().__init__(message, error_code="DATABASE_ERROR", **kwargs)
        self.operation = operation


class CacheError(GlossError):
    """Raised when dictionary cache operations fail."""

    def __init__(self, message: str, cache_key: Optional[str] = None, operation: Optional[str] = None, **kwargs):
        super().__init__(message, error_code="CACHE_ERROR", **kwargs)
        self.cache_key = cache_key
        self.operation = operation


# Utility functions for error handling
def handle_error(error: Exception, context: str = "", logger=None) -> GlossError:
    """
    Convert a generic exception to a GlossError with context.

    Args:
        error: The original exception
        context: Additional context about where the error occurred
        logger: Optional logger to log the error

    Returns:
        GlossError instance
    """
    if logger:
        logger.error(f"{context}: {error}", exc_info=True)

    if isinstance(error, GlossError):
        return error

    error_message = f"{context}: {error}" if context else str(error)
    lowered = str(error).lower()

    if "database" in lowered or "connection" in lowered or "sqlite" in lowered:
        return DatabaseError(error_message)
    elif "cache" in lowered:
        return CacheError(error_message)
    else:
        return GlossError(error_message, details={"original_error": str(error)})


def log_error(error: GlossError, logger=None, level: str = "error"):
    """
    Log a GlossError with structured information.

    Args:
        error: The error to log
        logger: Logger instance (uses default logger if None)
        level: Log level ("error", "warning", "info", "debug")
    """
    if logger is None:
        import logging
        logger = logging.getLogger(__name__)

    log_func = getattr(logger, level)
    log_func(
        f"{error.error_code}: {error.message}",
        extra={
            "error_code": error.error_code,
            "details": error.details,
            "context": {
                attr: getattr(error, attr, None)
                for attr in ["config_key", "table", "cache_key", "operation"]
                if hasattr(error, attr)
            },
        },
    )


__all__ = [
    "CacheError",
    "ConfigurationError",
    "DatabaseError",
    "DictionaryError",
    "GlossError",
    "handle_error",
    "log_error",
]
