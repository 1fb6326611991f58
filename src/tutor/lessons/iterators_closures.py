"""
# Iterators, Generators & Closures

Goal: process sequences lazily and capture state in functions.

Key points:
- ``iter()`` / ``next()`` drive the iterator protocol; ``StopIteration`` ends it
- Generator functions (``yield``) produce iterators with little code
- ``map``, ``filter``, ``zip``, ``itertools`` compose lazily
- ``lambda`` and nested functions are closures over enclosing variables
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator


class Counter:
    """Counts from 1 to ``limit`` using the iterator protocol by hand."""

    def __init__(self, limit: int = 5) -> None:
        self.count = 0
        self.limit = limit

    def __iter__(self) -> Counter:
        return self

    def __next__(self) -> int:
        if self.count >= self.limit:
            raise StopIteration
        self.count += 1
        return self.count


def fibonacci() -> Iterator[int]:
    a, b = 0, 1
    while True:
        yield a
        a, b = b, a + b


def make_adder(n: int) -> Callable[[int], int]:
    def add(x: int) -> int:
        return x + n

    return add


def counter_sum() -> int:
    """Zip two counters, multiply pairs, keep multiples of 3, sum."""
    pairs = zip(Counter(), itertools.islice(Counter(), 1, None))
    return sum(a * b for a, b in pairs if (a * b) % 3 == 0)


def run() -> None:
    print("=== Iterator basics ===")
    v1 = [1, 2, 3]
    it = iter(v1)
    print(f"next: {next(it)}, {next(it)}, {next(it)}, then {next(it, 'exhausted')!r}")

    print("\n=== Lazy adapters ===")
    doubled = map(lambda x: x * 2, v1)
    print(f"map() returns a lazy {type(doubled).__name__} object; list(...) = {list(doubled)}")
    evens = [x for x in range(10) if x % 2 == 0]
    print(f"comprehension evens: {evens}")
    print(f"first 10 fibonacci: {list(itertools.islice(fibonacci(), 10))}")

    print("\n=== Closures ===")
    add_five = make_adder(5)
    print(f"add_five(10) = {add_five(10)}")
    print(f"captured cell: {add_five.__closure__[0].cell_contents}")

    print("\n=== Custom iterator ===")
    print(f"list(Counter()) = {list(Counter())}")
    print(f"counter_sum() = {counter_sum()}")
