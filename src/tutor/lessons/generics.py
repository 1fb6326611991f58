"""
# Generics & TypeVar

Goal: write code that works for many types and say so in annotations.

Key points:
- Duck typing makes most Python code generic at runtime already
- ``TypeVar`` links argument and return types for type checkers
- ``Generic[T]`` parameterises classes: ``Stack[int]``
- Bounds (``bound=``) constrain what a type variable may be
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class SupportsLessThan(Protocol):
    def __lt__(self, other, /) -> bool: ...


C = TypeVar("C", bound=SupportsLessThan)


def largest(items: Sequence[C]) -> C:
    if not items:
        raise ValueError("largest() of an empty sequence")
    result = items[0]
    for item in items[1:]:
        if result < item:
            result = item
    return result


def swap(pair: tuple[T, U]) -> tuple[U, T]:
    return pair[1], pair[0]


def sort_desc(items: Iterable[C]) -> list[C]:
    return sorted(items, reverse=True)


@dataclass(frozen=True)
class Point(Generic[T]):
    x: T
    y: T

    def mixup(self, other: Point[U]) -> tuple[T, U]:
        return self.x, other.y


@dataclass
class Stack(Generic[T]):
    items: list[T] = field(default_factory=list)

    def push(self, item: T) -> None:
        self.items.append(item)

    def pop(self) -> T:
        return self.items.pop()

    def peek(self) -> T | None:
        return self.items[-1] if self.items else None

    def __len__(self) -> int:
        return len(self.items)


def run() -> None:
    print("=== Generic functions ===")
    print(f"largest([34, 50, 25, 100, 65]) = {largest([34, 50, 25, 100, 65])}")
    print(f"largest(['y', 'm', 'a', 'q'])  = {largest(['y', 'm', 'a', 'q'])!r}")
    print(f"swap((1, 'one')) = {swap((1, 'one'))}")

    print("\n=== Generic classes ===")
    integer = Point(5, 10)
    floating = Point(1.0, 4.0)
    print(f"{integer} and {floating}")
    print(f"mixup: {integer.mixup(Point('a', 'b'))}")

    stack: Stack[str] = Stack()
    for word in ("first", "second", "third"):
        stack.push(word)
    print(f"stack has {len(stack)} items, top = {stack.peek()!r}, popped = {stack.pop()!r}")

    print("\n=== Bounded type variables ===")
    print(f"sort_desc([3, 1, 2]) = {sort_desc([3, 1, 2])}")
    print(f"sort_desc('bca')     = {sort_desc('bca')}")
