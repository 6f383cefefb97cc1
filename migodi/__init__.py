"""
Python client for the Migodi mining services API
"""
from typing import Optional

from .client import MigodiClient
from .config import ClientConfig, DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS
from .errors import ErrorKind, MigodiError
from .models import Page, PaginationMeta
from .resources import (
    HashrateResource,
    PoolsResource,
    SoloMiningResource,
    ChannelMiningResource,
    PaymentResource
)

__version__ = "1.1.0"


class Migodi:
    """
    Entry point to the Migodi API

    Usage:
        migodi = Migodi('your-api-key')
        pricing = migodi.hashrate.get_pricing()
    """

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 timeout_ms: Optional[int] = None, warn_deprecated_params: bool = False,
                 client_config: Optional[ClientConfig] = None):
        if client_config is None:
            client_config = ClientConfig(
                api_key=api_key,
                base_url=base_url or DEFAULT_BASE_URL,
                timeout_ms=timeout_ms if timeout_ms is not None else DEFAULT_TIMEOUT_MS,
                warn_deprecated_params=warn_deprecated_params
            )
        self.client = MigodiClient(client_config)
        self.hashrate = HashrateResource(self.client)
        self.pools = PoolsResource(self.client)
        self.solo_mining = SoloMiningResource(self.client)
        self.channel_mining = ChannelMiningResource(self.client)
        self.payment = PaymentResource(self.client)

    @classmethod
    def from_config(cls, client_config: ClientConfig) -> 'Migodi':
        return cls(client_config=client_config)

    @classmethod
    def from_env(cls) -> 'Migodi':
        """Build a client from MIGODI_API_KEY and the other MIGODI_* variables"""
        return cls(client_config=ClientConfig.from_env())


__all__ = [
    'Migodi',
    'MigodiClient',
    'ClientConfig',
    'MigodiError',
    'ErrorKind',
    'Page',
    'PaginationMeta',
    'HashrateResource',
    'PoolsResource',
    'SoloMiningResource',
    'ChannelMiningResource',
    'PaymentResource'
]
