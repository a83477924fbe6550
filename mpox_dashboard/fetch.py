"""
OpenDataSUS connectivity check.

The CKAN package search is called only to find out whether the portal is
reachable; its payload is not parsed. Either way the dashboard shows the
fixed dataset, with a warning when the check fails.
"""

from typing import Any, Dict, Optional

import requests

from mpox_dashboard.config import config
from mpox_dashboard.logging_setup import get_logger
from mpox_dashboard.models import FALLBACK_DATASET, WARNING_MESSAGE, DisplayState

logger = get_logger(__name__)


class RemoteFetchFailure(Exception):
    """The OpenDataSUS request failed or did not report success."""
    pass


def check_connection(session: Optional[requests.Session] = None) -> Dict[str, Any]:
    """
    Issue the single GET against the package search endpoint.

    Returns:
        The decoded JSON envelope, whose ``success`` flag is truthy.

    Raises:
        RemoteFetchFailure: On network errors, non-2xx status, a body that is
            not a JSON object, or a falsy ``success`` flag.
    """
    http = session or requests
    params = {'q': config.OPENDATASUS_QUERY}
    try:
        response = http.get(config.OPENDATASUS_URL, params=params, timeout=config.OPENDATASUS_TIMEOUT)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        raise RemoteFetchFailure(f"Request to {config.OPENDATASUS_URL} failed: {e}") from e
    except ValueError as e:
        raise RemoteFetchFailure(f"Invalid JSON from {config.OPENDATASUS_URL}: {e}") from e

    if not isinstance(payload, dict):
        raise RemoteFetchFailure(f"Unexpected response shape: {type(payload).__name__}")
    if not payload.get('success'):
        raise RemoteFetchFailure("Falha API: success flag is false")
    return payload


def load_data(session: Optional[requests.Session] = None) -> DisplayState:
    """Run the connectivity check once and return the terminal display state."""
    try:
        check_connection(session)
    except RemoteFetchFailure as e:
        logger.warning("OpenDataSUS unavailable, using fallback dataset: %s", e)
        return DisplayState.loaded_with_warning(FALLBACK_DATASET, WARNING_MESSAGE)

    logger.info("OpenDataSUS reachable")
    return DisplayState.loaded(FALLBACK_DATASET)
