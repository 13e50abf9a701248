# primeprobe

A small in-memory hash table with string keys. It uses open addressing
with double hashing. Bucket counts are always prime. The table grows when
it is more than 70% full. It shrinks when it falls below 10%, but never
below its initial base size of 50.

## Install

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Using the table

```python
from primeprobe.table import HashTable

table = HashTable()             # base size 50, 53 buckets
table.insert("crab", "25364102")
print(table.search("crab"))     # 25364102

table["lobster"] = "7"
print("lobster" in table)       # True
print(len(table))               # 2

del table["lobster"]
print(table.search("lobster"))  # None
```

- Keys must be `str`. Any other key raises `TypeError`.
- `insert` (and `table[key] = value`) replaces the value of an existing key.
- `search` returns `None` for a missing key. `table[key]` raises `KeyError`
  for a missing key.
- `delete` (and `del table[key]`) raises `KeyError` if the key is absent.
- Iterating over the table yields the stored keys in bucket order.

The hashing and prime helpers are also available on their own:

```python
from primeprobe.table import polynomial_hash, double_hash, sdbm
from primeprobe.primes import is_prime, next_prime

next_prime(50)                  # 53
is_prime(53)                    # True
double_hash("crab", 53, 0)      # bucket probed on the first attempt
sdbm("crab")                    # unsigned 64-bit sdbm hash
```

`is_prime` returns `True` or `False`. It raises `ValueError` for numbers
below 2, where primality is undefined. `next_prime(x)` returns the smallest
prime that is at least `x`.

## Supporting modules

- `primeprobe.messages` provides leveled message reporting: `debug`,
  `notice`, `sysnotice`, `warn`, `syswarn`, `die` and `sysdie`. All of them
  take printf-style formats.
  - Each level has a list of handlers, which you can replace with
    `message_handlers_debug`, `message_handlers_notice`,
    `message_handlers_warn` and `message_handlers_die`.
  - `message_handlers_reset` restores the defaults. Debug messages are
    dropped, notices go to stdout, and warnings and fatal messages go to
    stderr.
  - The ready-made handlers are `message_log_stdout`, `message_log_stderr`
    and `message_log_syslog_*`.
  - `set_program_name` adds a prefix to stdout and stderr output.
  - `die` and `sysdie` raise `FatalError`, which is a `SystemExit`. Its
    status is the return value of the function set with
    `set_fatal_cleanup`, or 1 if no function is set.
- `primeprobe.xmalloc` provides buffer and string helpers:
  - Buffers: `xmalloc`, `xcalloc`, `xrealloc` and `xreallocarray` return
    `bytearray` buffers.
  - Strings: `xstrdup` and `xstrndup` copy up to the first NUL character.
  - Formatting: `xasprintf` and `xvasprintf` format printf-style strings.

  On a `MemoryError` these helpers call the error handler and then retry.
  Set the handler with `set_error_handler` and restore it with
  `reset_error_handler`. The default handler, `xmalloc_fail`, reports the
  failure through `sysdie`.

## Command line

    primeprobe

This builds a table, stores the key `crab` and prints its value,
`25364102`. The command takes no options beyond `--help`.

## What it does not do

The table lives only in memory. It offers no persistence and no way to
save or load its contents. It has no thread safety. The command line is a
fixed demonstration only: it does not accept keys or values.