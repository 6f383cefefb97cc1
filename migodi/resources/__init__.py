from .hashrate import HashrateResource, normalize_pool_params
from .pools import PoolsResource
from .solo_mining import SoloMiningResource
from .channel_mining import ChannelMiningResource
from .payment import PaymentResource

__all__ = [
    'HashrateResource',
    'PoolsResource',
    'SoloMiningResource',
    'ChannelMiningResource',
    'PaymentResource',
    'normalize_pool_params'
]
