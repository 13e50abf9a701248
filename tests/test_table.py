import pytest

from primeprobe.primes import next_prime
from primeprobe.table import (
    HT_INIT_BASESIZE,
    HT_PRIME1,
    HashTable,
    double_hash,
    main,
    polynomial_hash,
    sdbm,
)


def test_insert_and_search_sample():
    table = HashTable()
    table.insert("crab", "25364102")
    assert table.search("crab") == "25364102"
    assert len(table) == 1


def test_main_prints_sample_value(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "25364102\n"


def test_default_size_is_prime_above_base():
    table = HashTable()
    assert table.base_size == HT_INIT_BASESIZE
    assert table.size == next_prime(HT_INIT_BASESIZE)


def test_search_missing_returns_none():
    table = HashTable()
    table.insert("crab", "1")
    assert table.search("lobster") is None


def test_insert_replaces_existing_value():
    table = HashTable()
    table["crab"] = "old"
    table["crab"] = "new"
    assert table["crab"] == "new"
    assert len(table) == 1


def test_getitem_missing_raises():
    table = HashTable()
    table["crab"] = "1"
    with pytest.raises(KeyError):
        table["absent"]
    assert len(table) == 1
    assert table.search("absent") is None
    assert table["crab"] == "1"


def test_delete_removes_key():
    table = HashTable()
    table["crab"] = "1"
    table["shrimp"] = "2"
    del table["crab"]
    assert "crab" not in table
    assert table.search("crab") is None
    assert table["shrimp"] == "2"
    assert len(table) == 1


def test_delete_missing_raises():
    table = HashTable()
    table["crab"] = "1"
    with pytest.raises(KeyError):
        table.delete("lobster")
    assert len(table) == 1


def test_non_string_key_rejected():
    table = HashTable()
    with pytest.raises(TypeError):
        table.insert(5, "x")


def test_contains_and_iteration():
    table = HashTable()
    keys = {f"key{n}" for n in range(20)}
    for key in keys:
        table[key] = key.upper()
    assert set(table) == keys
    assert all(key in table for key in keys)
    assert "missing" not in table
    assert 42 not in table


def _colliding_pair(size):
    seen = {}
    n = 0
    while True:
        key = f"k{n}"
        slot = double_hash(key, size, 0)
        if slot in seen:
            return seen[slot], key
        seen[slot] = key
        n += 1


def test_tombstone_keeps_probe_chain():
    table = HashTable()
    first, second = _colliding_pair(table.size)
    table[first] = "a"
    table[second] = "b"
    del table[first]
    assert table[second] == "b"
    table[first] = "c"
    assert table[first] == "c"
    assert len(table) == 2


def test_polynomial_hash_empty_string():
    assert polynomial_hash("", HT_PRIME1, 53) == 0


def test_polynomial_hash_single_char():
    assert polynomial_hash("a", HT_PRIME1, 53) == ord("a") % 53


@pytest.mark.parametrize("text", ["crab", "a longer key", "x" * 40])
def test_polynomial_hash_in_range(text):
    assert 0 <= polynomial_hash(text, HT_PRIME1, 101) < 101


def test_double_hash_first_attempt_matches_primary_hash():
    assert double_hash("crab", 53, 0) == polynomial_hash("crab", HT_PRIME1, 53)


@pytest.mark.parametrize("attempt", range(10))
def test_double_hash_in_range(attempt):
    assert 0 <= double_hash("crab", 53, attempt) < 53


def test_sdbm_small_values():
    assert sdbm("") == 0
    assert sdbm("a") == ord("a")


def test_sdbm_fits_in_64_bits():
    assert 0 <= sdbm("z" * 100) < 2**64