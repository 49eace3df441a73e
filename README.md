# algopractice

Classic algorithm exercises as plain Python functions. They take ordinary
Python sequences, return their answers, and raise an exception (mostly
`ValueError`) on input they cannot handle.

## Installation

```
pip install .
```

Python 3.10 or later is required. The only dependency is `sortedcontainers`.

## Modules

### `algopractice.numbers`

- `add(*args)`: sum of two or three integers; any other count raises `TypeError`.
- `binary_search(values, target, start=0, end=None)`: index of `target` in the
  sorted slice `values[start:end + 1]`, or `-1`.
- `divisors_table(n)`: for every `j` in `0..n`, its divisors greater than 1.
- `sieve(n)`: list of booleans telling whether each `j` in `0..n` is prime.
- `smallest_and_largest_prime_factors(n)`: two lists with the smallest and
  largest prime factor of each `j` in `0..n` (0 for 0 and 1).
- `prime_factors(number, limit=None)`: distinct prime factors in ascending
  order; `number` must not exceed `limit`.

```python
from algopractice.numbers import prime_factors, sieve

sieve(5)           # [False, False, True, True, False, True]
prime_factors(18)  # [2, 3]
```

### `algopractice.bits`

`BinaryNumber(value)` wraps a 32-bit signed integer. Its methods are
`to_binary()`, `is_bit_set(i)`, `unset_bit(i)`, `count_set_bits()`,
`parity()` (a `Parity.ODD` / `Parity.EVEN` value), `clear_lsbs(i)` (clears
bits `0..i`), `clear_msbs(i)` (keeps only bits `0..i`) and
`check_power_of_two()`, which returns `value & (value - 1)` as a flag: `False`
for powers of two and for zero, `True` otherwise. Bit positions must be in
`0..31`.

```python
from algopractice.bits import BinaryNumber

BinaryNumber(5).count_set_bits()  # 2
BinaryNumber(5).to_binary()       # '00000000000000000000000000000101'
```

### `algopractice.blocks`

An in-memory model of unspanned record storage. Records (`Record`,
`FixedLengthRecord`, `VariableLengthRecord`) are lists of `(name, value)`
fields; a numeric value counts 4 bytes, any other 8. Each record stored in a
`Block` is followed by a one-byte `Separator`. `BlockFile(block_size)` chains
blocks: `run_query(query=None)` inserts one variable-length record per field
list (built-in sample data when no query is given), `blocks()` returns the
chain and `render()` draws it. A record that does not fit in an empty block
raises `RecordTooLargeError`.

```python
from algopractice.blocks import BlockFile

f = BlockFile(20)
f.run_query()
print(f.render(), end="")   # |{A:23, B:hello}${C:23}$|-------->
```

### `algopractice.matching`

`allocate_apartments(applicants, apartments, tolerance)`,
`sell_tickets(prices, offers)` (price paid per customer, or `None`),
`count_gondolas(weights, max_weight)`,
`find_pair_with_sum(values, target)` (1-based positions, or `None`) and
`find_values_with_sum(values, target)` (the two values, or `None`).

### `algopractice.counting`

`count_rounds(permutation)`, `count_distinct(values)`,
`longest_unique_run(songs)`, `count_subarrays_with_sum(values, target)`,
`max_subarray_sum(values)` and `nearest_smaller_positions(values)`.

### `algopractice.scheduling`

`max_movies(movies)`, `max_customers(intervals)`,
`allocate_rooms(stays)` (number of rooms and the room of each stay),
`max_task_reward(tasks)`, `min_reading_time(times)` and
`min_production_time(machine_times, products)`.

```python
from algopractice.scheduling import allocate_rooms

allocate_rooms([(1, 2), (2, 4), (4, 4)])  # (2, [1, 2, 1])
```

### `algopractice.arrays`

`smallest_missing_sum(coins)`, `min_stick_cost(lengths)` and
`longest_passages(street_length, lights)`.

```python
from algopractice.arrays import longest_passages
from algopractice.counting import count_distinct, max_subarray_sum
from algopractice.matching import allocate_apartments, count_gondolas

longest_passages(8, [3, 6, 2])                          # [5, 3, 3]
count_distinct([2, 3, 2, 2, 3])                         # 2
max_subarray_sum([-1, 3, -2, 5, 3, -5, 2, 2])           # 9
count_gondolas([7, 2, 3, 9], 10)                        # 3
allocate_apartments([60, 45, 80, 60], [30, 60, 75], 5)  # 2
```

## Command line

The `algopractice` command reads whitespace-separated integers from standard
input and prints the answer. It has four subcommands:

| Command          | Input                                                           | Output |
|------------------|-----------------------------------------------------------------|--------|
| `sieve`          | `n`                                                             | one line `Number: j is prime` / `not prime` for each `j` in `1..n` |
| `factorize`      | table limit, number                                             | distinct prime factors, space separated |
| `apartments`     | apartment count, applicant count, tolerance, apartment sizes, desired sizes | number of applicants housed |
| `traffic-lights` | street length, light count, light positions                     | longest passage after each light |

```
printf '8 3\n3 6 2\n' | algopractice traffic-lights
5 3 3
```

Malformed input prints `error: ...` on standard error and exits with status 1.
`algopractice --help` lists the subcommands.

## What it does not do

Only the four problems above have a command; every other function is
available from Python only. The block storage in `algopractice.blocks` lives
in memory and is never written to disk.

## Running the tests

```
pip install ".[test]"
pytest
```