#!/usr/bin/env python3
"""
bloombloom demo
Pre-filters lookups against a slow store with a Bloom filter
"""

import asyncio
import sys
from bloombloom import BloomFilter, FilterConfig, PrefilterGuard
from bloombloom.monitoring import LogManager, MetricsCollector


async def main():
    """Main entry point for the demo"""
    LogManager(log_level="INFO")

    store = {f"user:{i}" for i in range(1000)}

    async def slow_store_lookup(key: str) -> bool:
        await asyncio.sleep(0.001)  # stand-in for a database round trip
        return key in store

    bloom = BloomFilter.from_config(FilterConfig(capacity=1000, error_rate=0.01))
    guard = PrefilterGuard(bloom, slow_store_lookup)
    guard.remember_all(store)

    # Half present, half absent
    keys = [f"user:{i}" for i in range(500, 1500)]
    found = 0
    for key in keys:
        if await guard.lookup_async(key):
            found += 1

    print(f"\nFound {found} of {len(keys)} keys")
    print("\nLookup Statistics:")
    for name, value in guard.get_stats().items():
        print(f"  {name}: {value}")

    print("\nFilter Metrics:")
    snapshot = MetricsCollector(bloom).get_current_snapshot()
    for name, value in snapshot['filter_metrics'].items():
        print(f"  {name}: {value}")

if __name__ == "__main__":
    print("🌸 bloombloom demo starting...")
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\n🛑 Demo stopped by user")
    except Exception as e:
        print(f"❌ Error: {e}")
        sys.exit(1)
    print("✅ Demo completed!")
