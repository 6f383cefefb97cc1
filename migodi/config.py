"""
Configuration for the Migodi API client
"""
import os
from dataclasses import dataclass

from .errors import MigodiError

# API settings
DEFAULT_BASE_URL = "https://app.migodi.com"
DEFAULT_TIMEOUT_MS = 30000  # milliseconds per request

# Environment variables read by ClientConfig.from_env()
API_KEY_ENV = "MIGODI_API_KEY"
BASE_URL_ENV = "MIGODI_BASE_URL"
TIMEOUT_ENV = "MIGODI_TIMEOUT_MS"
WARN_DEPRECATED_ENV = "MIGODI_WARN_DEPRECATED"

# Supported HTTP verbs, and the subset that carries a JSON body
HTTP_METHODS = ("GET", "POST", "PATCH", "PUT", "DELETE")
BODY_METHODS = ("POST", "PATCH", "PUT")


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings shared read-only by every request"""
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    warn_deprecated_params: bool = False

    def __post_init__(self):
        if not self.api_key:
            raise MigodiError.validation("API key is required")
        if isinstance(self.timeout_ms, bool) or not isinstance(self.timeout_ms, int) \
                or self.timeout_ms <= 0:
            raise MigodiError.validation(
                f"Timeout must be a positive number of milliseconds, got {self.timeout_ms!r}"
            )
        if not self.base_url:
            object.__setattr__(self, 'base_url', DEFAULT_BASE_URL)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @classmethod
    def from_env(cls, environ=None) -> 'ClientConfig':
        """
        Build a config from MIGODI_* environment variables

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            ClientConfig with unset variables falling back to the defaults
        """
        environ = os.environ if environ is None else environ

        timeout = environ.get(TIMEOUT_ENV)
        if timeout:
            try:
                timeout_ms = int(timeout)
            except ValueError:
                raise MigodiError.validation(f"{TIMEOUT_ENV} must be an integer, got {timeout!r}")
        else:
            timeout_ms = DEFAULT_TIMEOUT_MS

        warn = environ.get(WARN_DEPRECATED_ENV, '').strip().lower() in ('1', 'true', 'yes', 'on')

        return cls(
            api_key=environ.get(API_KEY_ENV, ''),
            base_url=environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL,
            timeout_ms=timeout_ms,
            warn_deprecated_params=warn,
        )
