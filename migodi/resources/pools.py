"""
Mining pool management
"""
from typing import Dict, Optional

from ..client import MigodiClient, quote_id


class PoolsResource:
    """Create, update and list the pools that orders point hashrate at"""

    def __init__(self, client: MigodiClient):
        self.client = client

    def create(self, params: Dict) -> Dict:
        """
        Create a new mining pool

        Args:
            params: Pool fields - algorithm, title, host, port, username,
                password, main
        """
        return self.client.request('POST', '/api/pool', params)

    def get_pool(self, pool_id: str) -> Dict:
        return self.client.request('GET', f"/api/pool/{quote_id(pool_id)}")

    def update(self, pool_id: str, params: Dict) -> Dict:
        """Update the given fields of an existing pool"""
        return self.client.request('PATCH', f"/api/pool/{quote_id(pool_id)}", params)

    def delete_pool(self, pool_id: str) -> Optional[Dict]:
        return self.client.request('DELETE', f"/api/pool/{quote_id(pool_id)}")

    def list(self, algorithm: Optional[str] = None, page: Optional[int] = None,
             limit: Optional[int] = None, order_by: Optional[str] = None,
             order: Optional[str] = None) -> Dict:
        return self.client.request('GET', '/api/pools', query={
            'algorithm': algorithm,
            'page': page,
            'limit': limit,
            'order_by': order_by,
            'order': order
        })
