"""
Bloom filter core: sizing, hash derivation and the bit store
"""

from .bit_store import BitArray
from .bloom_filter import BloomFilter
from .filter_config import FilterConfig
from .hashing import derive_indices
from .sizing import compute_bit_array_size, compute_hash_count

__all__ = [
    'BitArray',
    'BloomFilter',
    'FilterConfig',
    'derive_indices',
    'compute_bit_array_size',
    'compute_hash_count'
]
