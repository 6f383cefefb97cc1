"""
Hashrate order management
"""
import logging
import warnings
from typing import Any, Dict, Optional

from ..client import MigodiClient, quote_id
from ..errors import MigodiError

logger = logging.getLogger(__name__)


def normalize_pool_params(params: Dict, warn_deprecated: bool = False) -> Dict:
    """
    Map the deprecated pool_id field onto user_pool_id

    Works on a copy; the caller's dict is left untouched. user_pool_id wins
    when both are given, and pool_id never appears in the result.

    Raises:
        MigodiError: if neither field is set
    """
    payload = dict(params)
    user_pool_id = payload.get('user_pool_id')
    pool_id = payload.pop('pool_id', None)

    if user_pool_id is None and pool_id is None:
        raise MigodiError.validation("Either user_pool_id or pool_id is required")

    if user_pool_id is None:
        if warn_deprecated:
            warnings.warn(
                "pool_id is deprecated, use user_pool_id instead",
                DeprecationWarning,
                stacklevel=3
            )
        payload['user_pool_id'] = pool_id
    elif pool_id is not None:
        logger.debug("Both user_pool_id and pool_id given, ignoring pool_id")

    return payload


class HashrateResource:
    """Pricing, creation and lifecycle of hashrate orders"""

    def __init__(self, client: MigodiClient):
        self.client = client

    def get_pricing(self) -> Dict:
        """
        Get current hashrate pricing and order limits

        Returns:
            Dict of the form {'data': {'BTC': {'term': ..., 'hashrate': ..., 'price': ...}}}
        """
        return self.client.request('GET', '/api/hashrate/pricing')

    def create_order(self, params: Dict) -> Dict:
        """
        Create a new hashrate order

        Args:
            params: Order fields - coin, term, time_unit, hashrate, wallet_id,
                user_pool_id (or the deprecated pool_id), confirmation_email

        Returns:
            Created order
        """
        payload = normalize_pool_params(params, self.client.config.warn_deprecated_params)
        return self.client.request('POST', '/api/hashrate/order', payload)

    def get_order(self, order_id: str) -> Dict:
        return self.client.request('GET', f"/api/hashrate/order/{quote_id(order_id)}")

    def get_order_stats(self, order_id: str, since: Optional[Any] = None,
                        until: Optional[Any] = None) -> Dict:
        """
        Get time-series statistics for an order

        Args:
            order_id: The order ID
            since: Optional start timestamp (ISO 8601)
            until: Optional end timestamp (ISO 8601)
        """
        return self.client.request(
            'GET',
            f"/api/hashrate/order/{quote_id(order_id)}/stats",
            query={'since': since, 'until': until}
        )

    def pause_order(self, order_id: str) -> Dict:
        """Pause an active order, keeping its remaining duration"""
        return self.client.request('PATCH', f"/api/hashrate/order/{quote_id(order_id)}/pause")

    def resume_order(self, order_id: str) -> Dict:
        """Resume a paused order"""
        return self.client.request('PATCH', f"/api/hashrate/order/{quote_id(order_id)}/resume")

    def cancel_order(self, order_id: str) -> Dict:
        return self.client.request('DELETE', f"/api/hashrate/order/{quote_id(order_id)}")

    def list_orders(self, page: Optional[int] = None, limit: Optional[int] = None,
                    status: Optional[str] = None, order_by: Optional[str] = None,
                    order: Optional[str] = None) -> Dict:
        """
        List hashrate orders

        Returns:
            Pagination envelope {'data': [...], 'meta': {...}}
        """
        return self.client.request('GET', '/api/hashrate/orders', query={
            'page': page,
            'limit': limit,
            'status': status,
            'order_by': order_by,
            'order': order
        })
