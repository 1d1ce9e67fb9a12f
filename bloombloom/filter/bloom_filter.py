import logging
from typing import List

from .bit_store import BitArray
from .filter_config import FilterConfig
from .hashing import derive_indices
from .sizing import compute_bit_array_size, compute_hash_count

logger = logging.getLogger(__name__)


class BloomFilter:
    """
    Probabilistic set membership with no false negatives

    A query answers either "possibly in the set" or "definitely not in the set".
    The false positive rate stays close to error_rate while at most capacity
    distinct values have been added. Values can only be added, never removed.
    """

    def __init__(self, capacity: int, error_rate: float, exact_hash_count: bool = False):
        """
        Initialize Bloom filter

        Args:
            capacity: Expected number of items, a positive integer
            error_rate: Acceptable false positive rate, strictly between 0 and 1
            exact_hash_count: Derive the hash count with real instead of floor division

        Raises:
            InvalidArgument: If capacity or error_rate is out of range
        """
        bit_array_size = compute_bit_array_size(capacity, error_rate)
        hash_count = compute_hash_count(capacity, bit_array_size, exact=exact_hash_count)

        self._capacity = capacity
        self._error_rate = error_rate
        self._hash_count = hash_count
        self._bits = BitArray(bit_array_size)
        self._item_count = 0

        logger.debug(
            f"Bloom filter sized for {capacity} items at {error_rate}: "
            f"{bit_array_size} bits, {hash_count} hashes"
        )

    @classmethod
    def from_config(cls, config: FilterConfig) -> 'BloomFilter':
        return cls(config.capacity, config.error_rate, exact_hash_count=config.exact_hash_count)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def error_rate(self) -> float:
        return self._error_rate

    @property
    def bit_array_size(self) -> int:
        return len(self._bits)

    @property
    def hash_count(self) -> int:
        return self._hash_count

    @property
    def item_count(self) -> int:
        """Number of add calls, duplicates included"""
        return self._item_count

    @property
    def bits_set(self) -> int:
        return self._bits.count()

    @property
    def fill_ratio(self) -> float:
        return self.bits_set / self.bit_array_size

    @property
    def estimated_false_positive_rate(self) -> float:
        """Current false positive probability estimated from the fill ratio"""
        return self.fill_ratio ** self._hash_count

    @property
    def memory_bytes(self) -> int:
        return self._bits.nbytes

    def indices(self, value: str) -> List[int]:
        """Bit positions value maps to in this filter"""
        return derive_indices(value, self._hash_count, len(self._bits))

    def is_set(self, index: int) -> bool:
        return self._bits.get(index)

    def add(self, value: str):
        """Add value to the filter"""
        for index in self.indices(value):
            self._bits.set(index)
        self._item_count += 1

    def contains(self, value: str) -> bool:
        """Check if value might be in the set"""
        for index in self.indices(value):
            if not self._bits.get(index):
                return False
        return True

    def __contains__(self, value: str) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return self._item_count

    def __repr__(self) -> str:
        return (f"BloomFilter(capacity={self._capacity}, error_rate={self._error_rate}, "
                f"bits={self.bit_array_size}, hashes={self._hash_count})")
