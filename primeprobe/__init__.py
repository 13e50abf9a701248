"""Open-addressing hash table with double hashing over prime-sized buckets."""

__version__ = "0.1.0"
__all__ = ["primes", "table", "messages", "xmalloc"]