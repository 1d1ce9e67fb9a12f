import hashlib
import struct
from typing import List

DIGEST_SIZE = hashlib.md5().digest_size
CHUNK = struct.Struct('<i')  # 4-byte little-endian signed


def digest(value: str) -> bytes:
    """MD5 digest of the UTF-8 encoded value"""
    return hashlib.md5(value.encode('utf-8')).digest()


def derive_indices(value: str, hash_count: int, bit_array_size: int) -> List[int]:
    """
    Derive hash_count bit indices for value from a single digest

    Each index reads a 4-byte signed integer at offset (i * 4) % 16 of the MD5
    digest, so for more than four hashes the offsets wrap and reuse bytes.

    Args:
        value: String to hash
        hash_count: Number of indices to produce
        bit_array_size: Size of the bit array indices must fall into

    Returns:
        List of hash_count indices in [0, bit_array_size)
    """
    if not isinstance(value, str):
        raise TypeError(f"Bloom filter values must be str, got {type(value).__name__}")

    hash_bytes = digest(value)
    indices = []
    for i in range(hash_count):
        start = (i * CHUNK.size) % DIGEST_SIZE
        (chunk,) = CHUNK.unpack_from(hash_bytes, start)
        # Python ints don't overflow, abs(-2**31) stays positive
        indices.append(abs(chunk) % bit_array_size)
    return indices
