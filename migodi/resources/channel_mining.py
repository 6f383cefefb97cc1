"""
Channel mining order management

Channel mining provides dedicated hashrate for a fixed duration.
"""
from typing import Any, Dict, Optional

from ..client import MigodiClient, quote_id

PREFIX = '/api/channel-mining'


class ChannelMiningResource:
    """Browse channel mining packages and manage channel mining orders"""

    def __init__(self, client: MigodiClient):
        self.client = client

    def get_packages(self, page: Optional[int] = None, limit: Optional[int] = None) -> Dict:
        return self.client.request('GET', f"{PREFIX}/packages", query={
            'page': page,
            'limit': limit
        })

    def create_order(self, params: Dict) -> Dict:
        """
        Create a channel mining order

        Args:
            params: Order fields - package_id, payout_address, confirmation_email
        """
        return self.client.request('POST', f"{PREFIX}/order", params)

    def get_order(self, order_id: str) -> Dict:
        return self.client.request('GET', f"{PREFIX}/order/{quote_id(order_id)}")

    def get_payment_addresses(self, order_id: str, currency: str, payment_method: str) -> Dict:
        return self.client.request(
            'PUT',
            f"{PREFIX}/order/{quote_id(order_id)}/payment/addresses",
            {'currency': currency, 'payment_method': payment_method}
        )

    def get_order_stats(self, order_id: str, since: Optional[Any] = None,
                        until: Optional[Any] = None) -> Dict:
        return self.client.request(
            'GET',
            f"{PREFIX}/order/{quote_id(order_id)}/stats",
            query={'since': since, 'until': until}
        )

    def cancel_order(self, order_id: str) -> Dict:
        return self.client.request('DELETE', f"{PREFIX}/order/{quote_id(order_id)}")

    def list_orders(self, status: Optional[str] = None, page: Optional[int] = None,
                    limit: Optional[int] = None, order_by: Optional[str] = None,
                    order: Optional[str] = None) -> Dict:
        """
        List channel mining orders

        Returns:
            Pagination envelope {'data': [...], 'meta': {...}}
        """
        return self.client.request('GET', f"{PREFIX}/orders", query={
            'status': status,
            'page': page,
            'limit': limit,
            'order_by': order_by,
            'order': order
        })
