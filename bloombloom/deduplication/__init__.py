"""
Lookup pre-filtering backed by a Bloom filter
"""

from .prefilter_guard import PrefilterGuard

__all__ = [
    'PrefilterGuard'
]
