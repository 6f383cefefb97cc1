"""
HTTP request core for the Migodi API

Handles authentication, query construction, timeouts and translation of
failed responses into MigodiError.
"""
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote, urljoin

import requests
from urllib3.exceptions import ReadTimeoutError

from . import config
from .config import ClientConfig
from .deadline import CallDeadline, DeadlineAdapter
from .errors import MigodiError

logger = logging.getLogger(__name__)


def build_query(query: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """
    Serialize query parameters, skipping entries whose value is None

    Falsy values such as 0 or "" are kept. Booleans are sent as true/false.
    """
    params = {}
    if not query:
        return params
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[key] = 'true' if value else 'false'
        else:
            params[key] = str(value)
    return params


def is_timeout(error: requests.exceptions.RequestException) -> bool:
    """True for timeouts, including a read timeout requests wraps in ConnectionError"""
    if isinstance(error, requests.exceptions.Timeout):
        return True
    cause = error.args[0] if error.args else None
    return isinstance(cause, ReadTimeoutError)


def quote_id(value: Any) -> str:
    """Escape an identifier for use as a single path segment"""
    return quote(str(value), safe='')


class MigodiClient:
    """Authenticated HTTP client shared by all API resources"""

    def __init__(self, client_config: ClientConfig):
        self.config = client_config

    def _headers(self) -> Dict[str, str]:
        return {
            'Authorization': f"Bearer {self.config.api_key}",
            'Content-Type': 'application/json',
            'Accept': 'application/json'
        }

    def request(self, method: str, path: str, body: Any = None,
                query: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make an authenticated request to the Migodi API

        Args:
            method: HTTP verb (GET, POST, PATCH, PUT or DELETE)
            path: Endpoint path, e.g. '/api/hashrate/pricing'
            body: JSON payload, only sent for POST/PATCH/PUT
            query: Query parameters, None values are dropped

        Returns:
            Decoded JSON response, or None for an empty response

        Raises:
            MigodiError: on validation, transport, timeout or HTTP failure
        """
        method = method.upper()
        if method not in config.HTTP_METHODS:
            raise MigodiError.validation(f"Unsupported HTTP method: {method}")

        url = urljoin(self.config.base_url, path)
        kwargs = {
            'headers': self._headers(),
            'params': build_query(query)
        }
        if body is not None and method in config.BODY_METHODS:
            kwargs['json'] = body

        logger.debug(f"{method} {path}")

        # One timer bounds connect, headers and body; the session is per call
        # so the timer only ever aborts this call's sockets.
        with CallDeadline(self.config.timeout_seconds) as deadline:
            with requests.Session() as session:
                adapter = DeadlineAdapter(deadline)
                session.mount('https://', adapter)
                session.mount('http://', adapter)
                try:
                    response = session.request(method, url, timeout=deadline.remaining(), **kwargs)
                except requests.exceptions.RequestException as e:
                    if deadline.expired or is_timeout(e):
                        logger.warning(f"Timeout after {self.config.timeout_ms}ms on {method} {path}")
                        raise MigodiError.timeout()
                    logger.warning(f"Network error on {method} {path}: {e}")
                    raise MigodiError.network(str(e) or type(e).__name__)

        return self._handle_response(method, path, response)

    def _handle_response(self, method: str, path: str, response) -> Any:
        status = response.status_code

        if 200 <= status < 300:
            if status == 204 or not response.content:
                return None
            try:
                return response.json()
            except ValueError:
                logger.warning(f"Non-JSON response body from {method} {path} (HTTP {status})")
                raise MigodiError(
                    f"Invalid JSON in response with status {status}",
                    'INVALID_RESPONSE',
                    status
                )

        if status == 401:
            logger.warning(f"Authentication failed on {method} {path}")
            raise MigodiError.auth()
        if status == 429:
            logger.warning(f"Rate limit exceeded on {method} {path}")
            raise MigodiError.rate_limit()

        try:
            error = response.json()
        except ValueError:
            error = {}
        if not isinstance(error, dict):
            error = {}

        message = error.get('message') or f"Request failed with status {status}"
        code = error.get('code') or 'API_ERROR'
        logger.warning(f"{method} {path} failed with HTTP {status}: {message}")
        raise MigodiError(message, code, status)
