import inspect
import logging
from typing import Awaitable, Callable, Dict, Any, Iterable

from ..filter import BloomFilter

logger = logging.getLogger(__name__)


class PrefilterGuard:
    """Skips authoritative lookups for keys the Bloom filter has never seen"""

    def __init__(self, bloom_filter: BloomFilter, authoritative_check: Callable[[str], Any] = None):
        """
        Args:
            bloom_filter: Filter holding every key the authoritative store contains
            authoritative_check: Exact membership test, sync for lookup() or
                returning an awaitable for lookup_async()
        """
        self.bloom_filter = bloom_filter
        self.authoritative_check = authoritative_check

        # Statistics
        self.stats = {
            'lookups': 0,
            'skipped': 0,
            'forwarded': 0,
            'false_positives': 0
        }

    def remember(self, key: str):
        """Record that the authoritative store now holds key"""
        self.bloom_filter.add(key)

    def remember_all(self, keys: Iterable[str]):
        for key in keys:
            self.bloom_filter.add(key)

    def should_lookup(self, key: str) -> bool:
        """False means the key is definitely absent and the lookup can be skipped"""
        return self.bloom_filter.contains(key)

    def _require_check(self):
        if self.authoritative_check is None:
            raise RuntimeError("PrefilterGuard has no authoritative check configured")

    def _skip(self, key: str) -> bool:
        self.stats['lookups'] += 1
        if not self.bloom_filter.contains(key):
            self.stats['skipped'] += 1
            return True
        self.stats['forwarded'] += 1
        return False

    def _record_answer(self, key: str, found: bool) -> bool:
        if not found:
            # Filter said maybe, store said no
            self.stats['false_positives'] += 1
            logger.debug(f"Bloom filter false positive for {key!r}")
        return found

    def lookup(self, key: str) -> bool:
        """
        Check membership, calling the authoritative check only when needed

        Args:
            key: Key to look up

        Returns:
            True if the authoritative check confirms the key
        """
        self._require_check()
        if self._skip(key):
            return False
        result = self.authoritative_check(key)
        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                result.close()
            raise TypeError("use lookup_async for an awaitable authoritative check")
        return self._record_answer(key, bool(result))

    async def lookup_async(self, key: str) -> bool:
        """Same as lookup() for an authoritative check that returns an awaitable"""
        self._require_check()
        if self._skip(key):
            return False
        result: Awaitable = self.authoritative_check(key)
        return self._record_answer(key, bool(await result))

    def get_stats(self) -> Dict[str, Any]:
        """Get lookup statistics"""
        lookups = self.stats['lookups']
        forwarded = self.stats['forwarded']
        return {
            **self.stats,
            'skip_rate': self.stats['skipped'] / max(lookups, 1),
            'observed_false_positive_rate': self.stats['false_positives'] / max(forwarded, 1)
        }

    def reset_stats(self):
        for name in self.stats:
            self.stats[name] = 0
