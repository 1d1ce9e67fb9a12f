from dataclasses import dataclass


@dataclass
class FilterMetrics:
    """Sizing and occupancy of a Bloom filter"""
    capacity: int = 0
    error_rate: float = 0.0
    bit_array_size: int = 0
    hash_count: int = 0
    item_count: int = 0
    bits_set: int = 0
    fill_ratio: float = 0.0
    estimated_false_positive_rate: float = 0.0
    memory_bytes: int = 0
