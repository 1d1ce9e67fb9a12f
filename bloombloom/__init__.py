"""
bloombloom - a Bloom filter for pre-filtering expensive membership lookups
"""

from .errors import InvalidArgument
from .filter import BloomFilter, FilterConfig
from .deduplication import PrefilterGuard

__version__ = '0.1.0'

__all__ = [
    'InvalidArgument',
    'BloomFilter',
    'FilterConfig',
    'PrefilterGuard'
]
