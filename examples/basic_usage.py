#!/usr/bin/env python3
"""
Basic Bloom filter example
Demonstrates sizing, adding values and membership checks
"""

import sys
import os

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bloombloom import BloomFilter, InvalidArgument

def main():
    """Basic add/contains example"""
    print("🌸 Basic Bloom Filter Example")
    print("="*50)

    bloom = BloomFilter(capacity=100, error_rate=0.01)
    print(f"Sized filter: {bloom}")

    for word in ['apple', 'banana', 'cherry']:
        bloom.add(word)

    for word in ['apple', 'cherry', 'durian']:
        verdict = "possibly present" if word in bloom else "definitely absent"
        print(f"  {word}: {verdict}")

    try:
        BloomFilter(capacity=100, error_rate=1.0)
    except InvalidArgument as e:
        print(f"\nRejected bad configuration: {e}")

    print("\n✅ Basic example completed!")

if __name__ == "__main__":
    main()
