"""
Unit tests for the pagination envelope
"""
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from migodi import Page, PaginationMeta
from tests.mock_responses import *


class TestPage(unittest.TestCase):
    """Test Page parsing"""

    def test_full_page(self):
        """from/to span matches the items on a full, non-final page"""
        page = Page.from_response(HASHRATE_ORDERS_PAGE)

        self.assertEqual(len(page), 2)
        self.assertEqual(page.meta.to - page.meta.from_ + 1, len(page.data))
        self.assertEqual(page.meta.item_count, len(page))
        self.assertEqual(page.meta.per_page, len(page))
        self.assertTrue(page.meta.has_next)
        self.assertEqual([o['id'] for o in page], ['order-1', 'order-2'])

    def test_empty_page(self):
        page = Page.from_response(EMPTY_PAGE)

        self.assertEqual(len(page), 0)
        self.assertIsNone(page.meta.from_)
        self.assertEqual(page.meta.item_count, 0)
        self.assertFalse(page.meta.has_next)

    def test_meta_to_dict(self):
        meta = PaginationMeta.from_dict(HASHRATE_ORDERS_PAGE['meta'])
        self.assertEqual(meta.to_dict(), HASHRATE_ORDERS_PAGE['meta'])

    def test_missing_meta(self):
        page = Page.from_response({'data': [{'id': 'x'}]})
        self.assertIsNone(page.meta)
        self.assertEqual(len(page), 1)


if __name__ == '__main__':
    unittest.main()
