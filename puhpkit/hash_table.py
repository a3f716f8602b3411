"""A separately chained hash table keyed by strings."""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

V = TypeVar("V")

_MASK64 = (1 << 64) - 1

DEFAULT_CAPACITY = 1024
ULLONG_WRAP_AT = 4294967295


def _char_values(key: str) -> Iterator[int]:
    """Yield each byte of ``key`` as a signed char widened to an unsigned 64-bit value."""
    for byte in key.encode("utf-8"):
        yield byte if byte < 128 else (byte - 256) & _MASK64


class HashTable(Generic[V]):
    """Hash table of string keys with chained buckets and collision counting."""

    DEFAULT_CAPACITY = DEFAULT_CAPACITY
    ULLONG_WRAP_AT = ULLONG_WRAP_AT

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._capacity = 0
        self._size = 0
        self._collisions = 0
        self._table: Optional[List[List[Tuple[str, V]]]] = None
        self.set_capacity(capacity)

    def __repr__(self) -> str:
        return (
            f"HashTable(capacity={self._capacity}, size={self._size}, "
            f"collisions={self._collisions})"
        )

    def capacity(self) -> int:
        """Return the number of buckets."""
        return self._capacity

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def n_collisions(self) -> int:
        """Return the number of collisions currently counted."""
        return self._collisions

    def set_capacity(self, capacity: int) -> None:
        """Resize to ``capacity`` buckets, re-adding every existing entry."""
        old_table = self._table
        self._table = [[] for _ in range(capacity)]
        self._capacity = capacity
        self._size = 0
        self._collisions = 0
        if old_table is not None:
            for bucket in old_table:
                for key, value in list(bucket):
                    self.add(key, value)

    def hash(self, key: str) -> int:
        return self.mid_square_hash(key)

    def mid_square_hash(self, key: str) -> int:
        """Modified mid-square hash of ``key``; raises ``ValueError`` for too-short squares."""
        total = 1
        for value in _char_values(key):
            total = (total * value) & _MASK64
            total %= ULLONG_WRAP_AT
        squared = str((total * total) & _MASK64)
        new_length = len(squared) // 2
        start = new_length // 2
        middle = squared[start:start + new_length]
        if not middle:
            raise ValueError(f"cannot hash key {key!r}: no middle digits")
        return int(middle) % self._capacity

    def custom_hash_1(self, key: str) -> int:
        code = 0
        for value in _char_values(key):
            code = ((code * 47489) & _MASK64) ^ ((value * 49157) & _MASK64)
        return code % self._capacity

    def custom_hash_2(self, key: str) -> int:
        code = 0
        for value in _char_values(key):
            code = (code * 31 + value) & _MASK64
        return code % self._capacity

    def custom_hash_3(self, key: str) -> int:
        code = 0
        for value in _char_values(key):
            code = (code * 13 + value * 31) & _MASK64
        return code % self._capacity

    def custom_hash_4(self, key: str) -> int:
        code = 0
        for position, value in enumerate(_char_values(key), start=1):
            code = (code + value * position * position) & _MASK64
        return code % self._capacity

    def _bucket(self, key: str) -> List[Tuple[str, V]]:
        assert self._table is not None
        return self._table[self.hash(key) % self._capacity]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(k == key for k, _ in self._bucket(key))

    def add(self, key: str, value: V) -> None:
        """Add a new entry; raises ``KeyError`` if the key already exists."""
        if key in self:
            raise KeyError(f"Key already exists: {key}")
        bucket = self._bucket(key)
        if bucket:
            self._collisions += 1
        bucket.insert(0, (key, value))
        self._size += 1

    def get(self, key: str) -> V:
        """Return the value for ``key``; raises ``KeyError`` if absent."""
        for k, value in self._bucket(key):
            if k == key:
                return value
        raise KeyError(f"Cannot get value for key because it doesn't exist: {key}")

    def keys(self, sort: bool = False) -> List[str]:
        """Return every key, sorted if ``sort`` is true."""
        assert self._table is not None
        found = [key for bucket in self._table for key, _ in bucket]
        found.reverse()
        if sort:
            found.sort()
        return found

    def remove(self, key: str) -> None:
        """Remove the entry for ``key``; raises ``KeyError`` if absent."""
        bucket = self._bucket(key)
        for index, (k, _) in enumerate(bucket):
            if k == key:
                del bucket[index]
                self._size -= 1
                if len(bucket) > 1:
                    self._collisions -= 1
                return
        raise KeyError(f"Key not found: {key}")

    def clear(self) -> None:
        assert self._table is not None
        for bucket in self._table:
            bucket.clear()
        self._size = 0
        self._collisions = 0

    def copy(self) -> "HashTable[V]":
        """Return an independent table with the same buckets and counters."""
        other: HashTable[V] = HashTable(0)
        other._capacity = self._capacity
        other._size = self._size
        other._collisions = self._collisions
        assert self._table is not None
        other._table = [list(bucket) for bucket in self._table]
        return other

    __copy__ = copy