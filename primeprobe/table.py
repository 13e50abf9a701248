"""An open-addressing hash table of string keys using double hashing."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from typing import Any

from primeprobe.primes import next_prime

__all__ = [
    "HT_PRIME1",
    "HT_PRIME2",
    "HT_INIT_BASESIZE",
    "HashTable",
    "polynomial_hash",
    "double_hash",
    "sdbm",
    "main",
]

HT_PRIME1 = 691
HT_PRIME2 = 811
HT_INIT_BASESIZE = 50

_UINT64_MASK = (1 << 64) - 1

# Marks a slot whose entry was removed, so probe chains through it stay intact.
_DELETED = object()


def polynomial_hash(s: str, a: int, m: int) -> int:
    """Hash ``s`` as a polynomial in ``a`` over its character codes, modulo ``m``."""
    length = len(s)
    result = 0
    for position, char in enumerate(s):
        result = (result + pow(a, length - (position + 1)) * ord(char)) % m
    return result


def double_hash(s: str, num_buckets: int, attempt: int) -> int:
    """Return the bucket probed for ``s`` on the given attempt."""
    hash_a = polynomial_hash(s, HT_PRIME1, num_buckets)
    hash_b = polynomial_hash(s, HT_PRIME2, num_buckets)
    return (hash_a + attempt * (hash_b + 1)) % num_buckets


def sdbm(s: str) -> int:
    """Return the sdbm hash of ``s`` as an unsigned 64-bit integer."""
    result = 0
    for char in s:
        result = (ord(char) + (result << 6) + (result << 16) - result) & _UINT64_MASK
    return result


def _check_key(key: Any) -> str:
    if not isinstance(key, str):
        raise TypeError(f"keys must be str, not {type(key).__name__}")
    return key


class HashTable:
    """A hash table that resolves collisions by double hashing.

    The bucket count is the first prime at or above ``base_size``. The table
    doubles its base size once it is more than 70% full and halves it when it
    falls below 10%, never going under the initial base size of 50.
    """

    def __init__(self, base_size: int = HT_INIT_BASESIZE) -> None:
        self.base_size = base_size
        self.size = next_prime(base_size)
        self._count = 0
        self._buckets: list[Any] = [None] * self.size

    def _load(self) -> int:
        return self._count * 100 // self.size

    def _probe(self, key: str) -> Iterator[int]:
        hash_a = polynomial_hash(key, HT_PRIME1, self.size)
        step = polynomial_hash(key, HT_PRIME2, self.size) + 1
        for attempt in range(self.size):
            yield (hash_a + attempt * step) % self.size

    def _resize(self, base_size: int) -> None:
        if base_size < HT_INIT_BASESIZE:
            return
        resized = HashTable(base_size)
        for entry in self._buckets:
            if entry is not None and entry is not _DELETED:
                resized.insert(*entry)
        self.base_size = resized.base_size
        self.size = resized.size
        self._count = resized._count
        self._buckets = resized._buckets

    def insert(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        _check_key(key)
        if self._load() > 70:
            self._resize(self.base_size * 2)
        for index in self._probe(key):
            entry = self._buckets[index]
            if entry is None:
                self._buckets[index] = (key, value)
                self._count += 1
                return
            if entry is not _DELETED and entry[0] == key:
                self._buckets[index] = (key, value)
                return
        raise RuntimeError(f"no free bucket on the probe sequence for {key!r}")

    def search(self, key: str) -> Any | None:
        """Return the value stored under ``key``, or ``None`` if it is absent."""
        _check_key(key)
        for index in self._probe(key):
            entry = self._buckets[index]
            if entry is None:
                return None
            if entry is not _DELETED and entry[0] == key:
                return entry[1]
        return None

    def delete(self, key: str) -> None:
        """Remove ``key`` from the table; raise ``KeyError`` if it is absent."""
        _check_key(key)
        if self._load() < 10:
            self._resize(self.base_size // 2)
        for index in self._probe(key):
            entry = self._buckets[index]
            if entry is None:
                break
            if entry is not _DELETED and entry[0] == key:
                self._buckets[index] = _DELETED
                self._count -= 1
                return
        raise KeyError(key)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and any(
            entry is not None and entry is not _DELETED and entry[0] == key
            for entry in (self._buckets[index] for index in self._probe(key))
        )

    def __getitem__(self, key: str) -> Any:
        _check_key(key)
        for index in self._probe(key):
            entry = self._buckets[index]
            if entry is None:
                break
            if entry is not _DELETED and entry[0] == key:
                return entry[1]
        raise KeyError(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.insert(key, value)

    def __delitem__(self, key: str) -> None:
        self.delete(key)

    def __iter__(self) -> Iterator[str]:
        for entry in self._buckets:
            if entry is not None and entry is not _DELETED:
                yield entry[0]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, count={self._count})"


def main(argv: list[str] | None = None) -> int:
    """Store a sample entry, look it up and print its value."""
    parser = argparse.ArgumentParser(
        prog="primeprobe", description="Demonstrate the double-hashing table."
    )
    parser.parse_args(argv)
    table = HashTable()
    table.insert("crab", "25364102")
    print(table.search("crab"))
    return 0