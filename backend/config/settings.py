"""
Runtime Configuration

Reads service configuration from environment variables. Every key has a
development default so the service starts with no environment at all.

Keys:
- DATABASE_URL: SQLAlchemy URL of the user store
- SERVER_HOST / SERVER_PORT: bind address for uvicorn
- LOG_LEVEL: root log level name
- LOG_DIR: optional directory for the rotating log file
- SQL_ECHO: echo SQL statements ('true', '1', 'yes')
"""
import os
import logging
from pathlib import Path
from typing import Optional

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_TRUTHY = ('true', '1', 'yes')


def _get_bool(key: str, default: str = 'false') -> bool:
    return os.environ.get(key, default).lower() in _TRUTHY


def _get_port(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None or raw == '':
        return default
    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got '{raw}'", missing_keys=[key])
    if not 0 < port < 65536:
        raise ConfigurationError(f"{key} out of range: {port}", missing_keys=[key])
    return port


def _get_log_level(key: str, default: str = 'INFO') -> int:
    name = os.environ.get(key, default).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown {key}: '{name}'", missing_keys=[key])
    return level


def _get_log_dir(key: str) -> Optional[Path]:
    raw = os.environ.get(key)
    return Path(raw) if raw else None


DATABASE_URL = os.environ.get('DATABASE_URL', 'sqlite:///./users.db')
SQL_ECHO = _get_bool('SQL_ECHO')

SERVER_HOST = os.environ.get('SERVER_HOST', '0.0.0.0')
SERVER_PORT = _get_port('SERVER_PORT', 3000)

LOG_LEVEL = _get_log_level('LOG_LEVEL')
LOG_DIR = _get_log_dir('LOG_DIR')


def is_sqlite(url: str = DATABASE_URL) -> bool:
    """True when the configured store is SQLite."""
    return url.startswith('sqlite')
