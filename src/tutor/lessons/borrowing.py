"""
# References, Aliasing & Copies

Goal: control who can change shared data.

Key points:
- Every name bound to a mutable object can mutate it (aliasing)
- Read-only access: pass an immutable view (``tuple``, ``MappingProxyType``)
- ``copy.copy`` is shallow; ``copy.deepcopy`` copies nested objects too
- Functions should document whether they mutate their arguments

Common pitfalls:
- ``[[0] * 3] * 3`` creates three references to the same inner list
- Mutating a list while iterating over it
"""

import copy
from types import MappingProxyType


def calculate_length(s: str) -> int:
    return len(s)


def change(items: list[str]) -> None:
    items.append(", world")


def add_element(arr: list[int], value: int) -> None:
    arr.append(value)


def run() -> None:
    print("=== Read-only use ===")
    demo_immutable_reference()

    print("\n=== Mutating through a reference ===")
    demo_mutable_reference()

    print("\n=== Read-only views ===")
    demo_read_only_views()

    print("\n=== Shallow vs deep copies ===")
    demo_copies()


def demo_immutable_reference() -> None:
    s = "hello"
    length = calculate_length(s)
    print(f"The length of '{s}' is {length}")


def demo_mutable_reference() -> None:
    s = ["hello"]
    print(f"Before: {''.join(s)}")
    change(s)
    print(f"After: {''.join(s)}")

    arr = [1, 2, 3, 4, 5]
    print(f"array: {arr}")
    add_element(arr, 6)
    print(f"array: {arr}")


def demo_read_only_views() -> None:
    settings = {"theme": "dark"}
    view = MappingProxyType(settings)
    try:
        view["theme"] = "light"  # type: ignore[index]
    except TypeError as e:
        print(f"cannot write through the view: {e}")
    settings["theme"] = "light"
    print(f"the owner can, and the view sees it: {dict(view)}")


def demo_copies() -> None:
    grid = [[0] * 3] * 3
    grid[0][0] = 1
    print(f"aliased rows:   {grid}")

    grid = [[0] * 3 for _ in range(3)]
    grid[0][0] = 1
    print(f"separate rows:  {grid}")

    nested = {"tags": ["a"]}
    shallow = copy.copy(nested)
    deep = copy.deepcopy(nested)
    nested["tags"].append("b")
    print(f"shallow copy shares inner list: {shallow}")
    print(f"deep copy does not:             {deep}")
