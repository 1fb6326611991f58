"""
# Names, Objects & Reference Counting

Goal: understand who "owns" an object in Python.

Key points:
- Objects live on the heap; names and containers hold references to them
- CPython frees an object when its reference count drops to zero
- ``del`` removes a *name*, not the object
- Passing an argument passes a reference; nothing is copied implicitly
- ``weakref`` observes an object without keeping it alive

Common pitfalls:
- Assuming ``b = a`` copies a list
- Relying on ``__del__`` timing on interpreters without reference counting
"""

import sys
import weakref


class Resource:
    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Resource({self.name!r})"


def take_reference(s: list[str]) -> None:
    s.append("(touched by callee)")
    print(f"callee sees: {s}")


def run() -> None:
    print("=== Names point at objects ===")
    demo_shared_object()

    print("\n=== Scope & freeing ===")
    demo_scope_drop()

    print("\n=== Passing to functions ===")
    s1 = ["hello"]
    take_reference(s1)
    print(f"caller still owns it: {s1}")

    print("\n=== Immutable values are safe to share ===")
    x = 5
    y = x
    y += 1
    print(f"x = {x}, y = {y}  (ints are immutable, += rebinds y)")


def demo_shared_object() -> None:
    s1 = ["hello"]
    s2 = s1
    print(f"s1 is s2: {s1 is s2}")
    s2.append("world")
    print(f"after s2.append: s1 = {s1}")
    print(f"sys.getrefcount(s1) = {sys.getrefcount(s1)}  (counts the call's own argument too)")


def demo_scope_drop() -> None:
    res = Resource("temp")
    watcher = weakref.ref(res)
    print(f"alive: {watcher()}")
    del res
    print(f"after del: {watcher()}  (CPython freed it immediately)")
