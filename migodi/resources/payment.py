"""
Payment status and addresses
"""
from typing import Dict

from ..client import MigodiClient, quote_id


class PaymentResource:
    """Query payments and request payment addresses"""

    def __init__(self, client: MigodiClient):
        self.client = client

    def get_payment(self, payment_id: str) -> Dict:
        return self.client.request('GET', f"/api/payment/{quote_id(payment_id)}")

    def get_addresses(self, payment_id: str, currency: str, payment_method: str) -> Dict:
        """
        Get payment addresses for a currency and payment method

        Args:
            payment_id: The payment ID
            currency: e.g. 'BTC'
            payment_method: e.g. 'LIGHTNING'
        """
        return self.client.request(
            'PUT',
            f"/api/payment/{quote_id(payment_id)}/addresses",
            {'currency': currency, 'payment_method': payment_method}
        )
