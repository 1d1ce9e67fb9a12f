from dataclasses import dataclass
from .sizing import validate_capacity, validate_error_rate


@dataclass
class FilterConfig:
    """Configuration for building a Bloom filter"""
    capacity: int = 1000
    error_rate: float = 0.01
    exact_hash_count: bool = False   # real division of bits per item when sizing k

    def __post_init__(self):
        validate_capacity(self.capacity)
        validate_error_rate(self.error_rate)
