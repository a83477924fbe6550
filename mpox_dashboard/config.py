"""Configuration read from environment variables (a .env file is honoured).

Every setting is optional. The defaults reproduce the dashboard's stock
behaviour: one request to the OpenDataSUS package search for "mpox", with no
timeout, and the Dash development server on localhost:8050.
"""

import os
import logging
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

_logger = logging.getLogger(__name__)


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(name)
    if raw is None:
        return default
    raw = raw.strip()
    return raw if raw != '' else default


def _get_int_env(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except (ValueError, TypeError):
        _logger.warning("Invalid integer for %s: %r, falling back to %s", name, raw, default)
        return default


def _get_float_env(name: str, default: Optional[float]) -> Optional[float]:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except (ValueError, TypeError):
        _logger.warning("Invalid number for %s: %r, falling back to %s", name, raw, default)
        return default


def _get_bool_env(name: str, default: bool) -> bool:
    raw = _get_env(name)
    if raw is None:
        return default
    return raw.lower() in ['true', '1', 'on', 'yes']


class Config:
    """Settings for the dashboard, resolved once at import time."""

    # OpenDataSUS (CKAN) endpoint used as a connectivity check
    OPENDATASUS_URL = _get_env(
        'OPENDATASUS_URL', 'https://opendatasus.saude.gov.br/api/3/action/package_search'
    )
    OPENDATASUS_QUERY = _get_env('OPENDATASUS_QUERY', 'mpox')
    # None means wait for the response indefinitely
    OPENDATASUS_TIMEOUT = _get_float_env('OPENDATASUS_TIMEOUT', None)

    # Dash server
    DASH_HOST = _get_env('DASH_HOST', '127.0.0.1')
    DASH_PORT = _get_int_env('DASH_PORT', 8050)
    DASH_DEBUG = _get_bool_env('DASH_DEBUG', True)

    LOG_LEVEL = (_get_env('LOG_LEVEL', 'INFO') or 'INFO').upper()


config = Config()
