import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


_TRUTHY = {"1", "true", "yes", "on"}


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if not value:
        return default
    return value


def get_bool_env(key: str, default: bool = False) -> bool:
    value = get_env(key)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def get_int_env(key: str, default: int) -> int:
    value = get_env(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise RuntimeError(f"Environment variable {key} must be an integer, got: {value!r}")
