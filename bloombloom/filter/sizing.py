import math
import logging

from ..errors import InvalidArgument

logger = logging.getLogger(__name__)

LN2 = math.log(2)


def validate_capacity(capacity: int):
    """Reject anything but a positive integer capacity"""
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
        logger.warning(f"Rejected filter capacity {capacity!r}")
        raise InvalidArgument('capacity', capacity, "must be a positive integer")


def validate_error_rate(error_rate: float):
    """Reject error rates outside the open interval (0, 1), NaN included"""
    if isinstance(error_rate, bool) or not isinstance(error_rate, (int, float)) \
            or not 0 < error_rate < 1:
        logger.warning(f"Rejected filter error rate {error_rate!r}")
        raise InvalidArgument('error_rate', error_rate, "must be between 0 and 1 (exclusive)")


def compute_bit_array_size(capacity: int, error_rate: float) -> int:
    """
    Size of the bit array needed to reach error_rate at capacity items

    Args:
        capacity: Expected number of items
        error_rate: Target false positive probability, strictly between 0 and 1

    Returns:
        Number of bits, m = ceil(-(n * ln p) / (ln 2)^2)
    """
    validate_error_rate(error_rate)
    validate_capacity(capacity)

    size = -(capacity * math.log(error_rate)) / (LN2 * LN2)
    return max(1, math.ceil(size))


def compute_hash_count(capacity: int, bit_array_size: int, exact: bool = False) -> int:
    """
    Number of hash functions for a filter of bit_array_size bits

    Args:
        capacity: Expected number of items
        bit_array_size: Number of bits in the filter
        exact: Use real division of bits per item instead of floor division

    Returns:
        k = max(1, round((m // n) * ln 2)), or with m / n when exact is set
    """
    validate_capacity(capacity)

    if exact:
        bits_per_item = bit_array_size / capacity
    else:
        # Whole bits per item
        bits_per_item = bit_array_size // capacity

    return max(1, round(bits_per_item * LN2))
