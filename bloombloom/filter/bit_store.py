class BitArray:
    """Fixed-length, bit-packed array of flags that can only be set"""

    def __init__(self, size: int):
        if size < 1:
            raise ValueError("BitArray size must be at least 1")
        self.size = size
        self._bytes = bytearray((size + 7) // 8)

    def _check(self, index: int):
        if not 0 <= index < self.size:
            raise IndexError(f"bit index {index} out of range for {self.size} bits")

    def set(self, index: int):
        """Set bit at index; bits are never cleared"""
        self._check(index)
        self._bytes[index // 8] |= (1 << (index % 8))

    def get(self, index: int) -> bool:
        self._check(index)
        return bool(self._bytes[index // 8] & (1 << (index % 8)))

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __len__(self) -> int:
        return self.size

    def count(self) -> int:
        """Number of bits currently set"""
        return sum(bin(byte).count('1') for byte in self._bytes)

    @property
    def nbytes(self) -> int:
        return len(self._bytes)
