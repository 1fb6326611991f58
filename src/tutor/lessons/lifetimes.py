"""
# Scopes, Lifetimes & Context Managers

Goal: know how long names and resources live.

Key points:
- Name lookup follows LEGB: Local, Enclosing, Global, Built-in
- Closures keep enclosing variables alive after the outer call returns
- ``with`` ties a resource's lifetime to a block (``__enter__`` / ``__exit__``)
- ``contextlib.contextmanager`` builds context managers from generators
- Loop variables outlive the loop; comprehension variables do not

Common pitfalls:
- Late binding in closures created inside loops
- Forgetting to close files outside a ``with`` block
"""

from __future__ import annotations

from contextlib import contextmanager
from collections.abc import Iterator


def longest(x: str, y: str) -> str:
    return x if len(x) > len(y) else y


def first_word(s: str) -> str:
    return s.split(" ", 1)[0]


class Tracked:
    """Context manager that records its own lifetime."""

    def __init__(self, name: str, log: list[str]) -> None:
        self.name = name
        self.log = log

    def __enter__(self) -> Tracked:
        self.log.append(f"enter {self.name}")
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.log.append(f"exit {self.name}")
        return False


@contextmanager
def announced(label: str) -> Iterator[str]:
    print(f"  -> opening {label}")
    try:
        yield label.upper()
    finally:
        print(f"  <- closing {label}")


def run() -> None:
    print("=== Scopes ===")
    demo_scopes()

    print("\n=== Values returned from functions ===")
    string1 = "long string is long"
    string2 = "xyz"
    print(f"the longest string is {longest(string1, string2)!r}")
    print(f"first word: {first_word('hello world')!r}")

    print("\n=== Context managers ===")
    demo_context_managers()

    print("\n=== Late binding in closures ===")
    late = [lambda: i for i in range(3)]
    bound = [lambda i=i: i for i in range(3)]
    print(f"late-bound:  {[f() for f in late]}")
    print(f"bound early: {[f() for f in bound]}")


def demo_scopes() -> None:
    for loop_var in range(3):
        pass
    print(f"loop variable still visible after the loop: {loop_var}")
    squares = [n * n for n in range(3)]
    print(f"comprehension variable is not: {'n' in locals()} (squares={squares})")


def demo_context_managers() -> None:
    log: list[str] = []
    with Tracked("outer", log):
        with Tracked("inner", log):
            log.append("work")
    print(f"lifetime log: {log}")

    with announced("resource") as handle:
        print(f"  using {handle}")
