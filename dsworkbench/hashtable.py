"""A fixed-size hash table with separate chaining and a polynomial string hash."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

_MASK = (1 << 64) - 1
_BASE = 31
DEFAULT_SIZE = 1009


class HashTable:
    """Maps string keys to integers; the first value stored for a key wins."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError(f"table size must be positive, got {size}")
        self._size = size
        self._buckets: list[list[tuple[str, int]]] = [[] for _ in range(size)]
        self._count = 0

    def bucket_index(self, key: str) -> int:
        """Return the bucket a key falls into.

        Each byte contributes ``(byte - 'a' + 1) * 31**i``, with bytes taken as
        signed and arithmetic wrapping at 64 bits before the modulus.
        """
        value = 0
        power = 1
        for byte in key.encode("utf-8"):
            char = byte - 256 if byte >= 128 else byte
            term = ((char - ord("a") + 1) * power) & _MASK
            value = ((value + term) & _MASK) % self._size
            power = (power * _BASE) % self._size
        return value

    def insert(self, key: str, value: int) -> bool:
        """Store ``value`` under ``key`` unless the key is already present.

        Returns True when the entry was added.
        """
        bucket = self._buckets[self.bucket_index(key)]
        if any(existing == key for existing, _ in bucket):
            return False
        bucket.append((key, value))
        self._count += 1
        return True

    def get(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """Return the value stored under ``key``, or ``default``."""
        for existing, value in self._buckets[self.bucket_index(key)]:
            if existing == key:
                return value
        return default

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(existing == key for existing, _ in self._buckets[self.bucket_index(key)])

    def __iter__(self) -> Iterator[tuple[str, int]]:
        """Yield ``(key, value)`` pairs bucket by bucket, in insertion order within a bucket."""
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return self._count