"""
# Decorators & Metaprogramming

Goal: write code that writes or wraps code.

Key points:
- A decorator is a callable taking a function and returning a replacement
- ``functools.wraps`` keeps the wrapped function's name and docstring
- Decorators with arguments are decorator factories
- Class decorators and ``__init_subclass__`` customise class creation
- ``type(name, bases, ns)`` builds classes at runtime

Common pitfalls:
- Forgetting ``functools.wraps``
- Decorators that swallow the wrapped function's return value
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any


def shout(func: Callable[..., str]) -> Callable[..., str]:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> str:
        return func(*args, **kwargs).upper() + "!"

    return wrapper


def repeat(times: int) -> Callable[[Callable[..., Any]], Callable[..., list[Any]]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., list[Any]]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> list[Any]:
            return [func(*args, **kwargs) for _ in range(times)]

        return wrapper

    return decorator


def timed(func: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        t0 = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            print(f"  {func.__name__} took {(time.perf_counter() - t0) * 1000:.3f} ms")

    return wrapper


@shout
def greet(name: str) -> str:
    """Say hello."""
    return f"hello, {name}"


@repeat(3)
def roll() -> str:
    return "🎲"


@timed
def slow_sum(n: int) -> int:
    return sum(range(n))


def make_plugin_base() -> type:
    """Return a fresh base class whose subclasses register themselves."""

    class Plugin:
        registry: dict[str, type] = {}

        def __init_subclass__(cls, **kwargs: Any) -> None:
            super().__init_subclass__(**kwargs)
            Plugin.registry[cls.__name__.lower()] = cls

    return Plugin


def make_record_class(name: str, *fields: str) -> type:
    def __init__(self, *values: Any) -> None:
        for field_name, value in zip(fields, values, strict=True):
            setattr(self, field_name, value)

    def __repr__(self) -> str:
        body = ", ".join(f"{f}={getattr(self, f)!r}" for f in fields)
        return f"{name}({body})"

    return type(name, (), {"__init__": __init__, "__repr__": __repr__, "__slots__": fields})


def run() -> None:
    print("=== Function decorators ===")
    print(greet("world"))
    print(f"wraps kept metadata: name={greet.__name__!r}, doc={greet.__doc__!r}")

    print("\n=== Decorators with arguments ===")
    print(f"roll() -> {roll()}")

    print("\n=== Wrapping behaviour ===")
    print(f"slow_sum(100_000) = {slow_sum(100_000)}")

    print("\n=== Class creation hooks ===")
    Plugin = make_plugin_base()

    class Csv(Plugin):
        pass

    class Json(Plugin):
        pass

    print(f"plugins registered by __init_subclass__: {sorted(Plugin.registry)}")

    print("\n=== Building classes at runtime ===")
    Point = make_record_class("Point", "x", "y")
    print(f"{Point(1, 2)!r} built by type()")
