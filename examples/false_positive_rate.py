#!/usr/bin/env python3
"""
False positive rate example
Compares measured false positives with the configured error rate,
for both floor-division and exact hash count sizing
"""

import sys
import os
import uuid

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bloombloom import BloomFilter

def measure(capacity: int, error_rate: float, exact: bool, probes: int = 10000) -> float:
    bloom = BloomFilter(capacity, error_rate, exact_hash_count=exact)
    for _ in range(capacity):
        bloom.add(uuid.uuid4().hex)

    false_positives = sum(1 for i in range(probes) if f"absent-{i}" in bloom)
    return false_positives / probes

def main():
    print("📈 False Positive Rate Example")
    print("="*50)

    for capacity, error_rate in [(100, 0.01), (1000, 0.01), (10000, 0.001)]:
        for exact in (False, True):
            rate = measure(capacity, error_rate, exact)
            mode = "exact" if exact else "floor"
            print(f"  n={capacity:<6} p={error_rate:<6} k-mode={mode:<5} measured={rate:.4f}")

    print("\n✅ False positive rate example completed!")

if __name__ == "__main__":
    main()
