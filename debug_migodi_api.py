#!/usr/bin/env python3
"""
Debug script to check connectivity to the Migodi API

Reads the API key from MIGODI_API_KEY (and optionally MIGODI_BASE_URL,
MIGODI_TIMEOUT_MS) and dumps what the API returns.
"""
import json
import logging
import sys

from migodi import Migodi, MigodiError, ErrorKind, Page


def dump(title, data):
    print(f"\n=== {title} ===")
    print(json.dumps(data, indent=2))


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG if '-v' in sys.argv else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        migodi = Migodi.from_env()
    except MigodiError as e:
        print(f"✗ {e.message} - set MIGODI_API_KEY first")
        sys.exit(1)

    print(f"Testing Migodi API at {migodi.client.config.base_url}")
    print("=" * 60)

    try:
        dump("HASHRATE PRICING", migodi.hashrate.get_pricing())

        orders = migodi.hashrate.list_orders(page=1, limit=5)
        dump("HASHRATE ORDERS", orders)
        page = Page.from_response(orders)
        if page.meta:
            print(f"Showing {len(page)} of {page.meta.total} orders "
                  f"(page {page.meta.current_page} of {page.meta.last_page})")

        dump("POOLS", migodi.pools.list(limit=5))
        print("\n✓ API key works")

    except MigodiError as e:
        if e.kind is ErrorKind.AUTH:
            print("✗ API key rejected - check it at https://app.migodi.com/user/api-tokens")
        elif e.kind is ErrorKind.RATE_LIMIT:
            print("✗ Rate limited - wait a minute and retry")
        else:
            print(f"✗ {e.code}: {e.message} (HTTP {e.status})")
        sys.exit(1)
