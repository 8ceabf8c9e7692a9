"""
Centralized Logging Configuration

Provides structured logging for the matching engine with:
- Component-specific loggers under the "patroon" namespace
- Consistent pipe-separated formatting
- Silent-by-default behaviour for host applications
"""

import logging
import sys
from typing import Any, Optional


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGER CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

ROOT_LOGGER_NAME = "patroon"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """
    Configure logging for the library.

    Only the "patroon" logger is touched; the host application's root
    logger is left alone.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Create formatters
    console_formatter = logging.Formatter(
        fmt="%(asctime)s | %(name)-18s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_formatter = logging.Formatter(
        fmt="%(asctime)s | %(name)s | %(levelname)s | %(filename)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(console_formatter)

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Prevent duplicate logs if setup_logging() is called again
    if package_logger.handlers:
        package_logger.handlers.clear()

    package_logger.setLevel(log_level)
    package_logger.addHandler(console_handler)
    package_logger.propagate = False

    # File handler (optional)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(file_formatter)
        package_logger.addHandler(file_handler)


# ═══════════════════════════════════════════════════════════════════════════════
# COMPONENT LOGGERS
# ═══════════════════════════════════════════════════════════════════════════════

# Libraries stay silent until the application configures logging
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

logger_patterns = logging.getLogger("patroon.patterns")
logger_matcher = logging.getLogger("patroon.matcher")
logger_dispatcher = logging.getLogger("patroon.dispatcher")


# ═══════════════════════════════════════════════════════════════════════════════
# STRUCTURED LOGGING HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

class LogContext:
    """Helper for consistent structured logging"""

    @staticmethod
    def format_dict(data: dict) -> str:
        """Format dictionary for logging"""
        return " | ".join(f"{k}={v}" for k, v in data.items())

    @staticmethod
    def format_value(value: Any, limit: int = 100) -> str:
        """Truncated repr of a candidate value; broken __repr__ falls back to object's"""
        try:
            text = repr(value)
        except Exception:
            text = object.__repr__(value)
        if len(text) > limit:
            return text[:limit - 3] + "..."
        return text

    @staticmethod
    def format_handler(handler: Any) -> str:
        """Readable name of a handler callable"""
        return getattr(handler, "__qualname__", None) or repr(handler)


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGING UTILITIES
# ═══════════════════════════════════════════════════════════════════════════════

def log_dispatcher_built(num_cases: int):
    """Log dispatcher construction"""
    logger_dispatcher.debug(f"DISPATCHER_BUILT | cases={num_cases}")


def log_dispatcher_invalid(message: str):
    """Log a rejected dispatcher construction"""
    logger_dispatcher.warning(f"DISPATCHER_INVALID | message={message}")


def log_pattern_invalid(constructor: str, message: str):
    """Log a rejected pattern construction"""
    context = {"constructor": constructor, "message": message}
    logger_patterns.warning(f"PATTERN_INVALID | {LogContext.format_dict(context)}")


def log_dispatch_match(index: int, handler: Any, value: Any, limit: int = 100):
    """Log the case selected for a candidate"""
    if not logger_dispatcher.isEnabledFor(logging.DEBUG):
        return
    context = {
        "case": index,
        "handler": LogContext.format_handler(handler),
        "value": LogContext.format_value(value, limit),
    }
    logger_dispatcher.debug(f"DISPATCH_MATCH | {LogContext.format_dict(context)}")


def log_dispatch_no_match(num_cases: int, value: Any, limit: int = 100):
    """Log exhaustion of every case"""
    if not logger_dispatcher.isEnabledFor(logging.DEBUG):
        return
    context = {"cases": num_cases, "value": LogContext.format_value(value, limit)}
    logger_dispatcher.debug(f"DISPATCH_NO_MATCH | {LogContext.format_dict(context)}")


def log_match_trace(kind: str, pattern: Any, value: Any, result: bool, limit: int = 100):
    """Log a single matcher decision"""
    if not logger_matcher.isEnabledFor(logging.DEBUG):
        return
    context = {
        "kind": kind,
        "pattern": LogContext.format_value(pattern, limit),
        "value": LogContext.format_value(value, limit),
        "result": result,
    }
    logger_matcher.debug(f"MATCH_TRACE | {LogContext.format_dict(context)}")
