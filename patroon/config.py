"""
Library Configuration

Centralized configuration for the matching engine.
Values can be overridden through environment variables (or a .env file).
"""

from typing import Optional

from patroon.infra.env import get_env, get_bool_env, get_int_env
from patroon.infra.logger import LogContext, setup_logging


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGING CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

AVAILABLE_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Unset means the library installs no handler of its own
LOG_LEVEL: Optional[str] = get_env("PATROON_LOG_LEVEL")

# Optional log file, only used together with LOG_LEVEL
LOG_FILE_PATH: Optional[str] = get_env("PATROON_LOG_FILE")

# Log every matcher decision at DEBUG (very verbose)
TRACE_MATCHING: bool = get_bool_env("PATROON_TRACE")


# ═══════════════════════════════════════════════════════════════════════════════
# DIAGNOSTICS
# ═══════════════════════════════════════════════════════════════════════════════

# Maximum length of a candidate repr in error messages and logs
MAX_REPR_LENGTH: int = get_int_env("PATROON_MAX_REPR", 100)


# ═══════════════════════════════════════════════════════════════════════════════
# HELPER FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════════

def truncate_repr(value) -> str:
    """repr() of a value, cut down to MAX_REPR_LENGTH characters"""
    return LogContext.format_value(value, MAX_REPR_LENGTH)


def validate_config():
    """Validate configuration on import"""
    if LOG_LEVEL is not None:
        assert LOG_LEVEL.upper() in AVAILABLE_LOG_LEVELS, f"Invalid PATROON_LOG_LEVEL: {LOG_LEVEL}"
    assert MAX_REPR_LENGTH >= 10, "PATROON_MAX_REPR must be at least 10"


# Validate on import
validate_config()

if LOG_LEVEL is not None:
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE_PATH)
