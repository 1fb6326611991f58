"""
Protocol definitions for tutor.

Manifesto:
    The core never looks inside a lesson. All it needs is something that
    can be invoked with no arguments and returns nothing. Expressing that
    as a protocol, rather than storing bare callables, lets richer lesson
    kinds (for example ones that report a structured outcome) slot in
    without touching the resolver or the dispatcher.

Architecture:
    ::

        protocols.py
        ├── LessonRunnable    : zero-argument "invoke()" capability
        └── FunctionRunnable  : adapts a plain ``run()`` function

Tags:
    protocol, runnable, command-pattern, tutor-core

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class LessonRunnable(Protocol):
    """
    Contract for a runnable lesson body.

    ``invoke()`` performs console output only and returns nothing.
    Exceptions raised inside it are the lesson's own business and
    propagate unchanged.
    """

    def invoke(self) -> None:
        """Run the lesson to completion."""
        ...


@dataclass(frozen=True, slots=True)
class FunctionRunnable:
    """Wrap a zero-argument function as a :class:`LessonRunnable`."""

    func: Callable[[], None]

    def invoke(self) -> None:
        self.func()

    @property
    def name(self) -> str:
        """Qualified name of the wrapped function, for logs."""
        module = getattr(self.func, "__module__", None) or "?"
        qualname = getattr(self.func, "__qualname__", None) or repr(self.func)
        return f"{module}.{qualname}"


__all__ = ["LessonRunnable", "FunctionRunnable"]
