"""
Shared pytest fixtures for tutor tests.

This module provides:
- Logging/settings reset for test isolation
- A recording runnable that counts invocations
- Small synthetic registries for resolver, lister and dispatcher tests
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from tutor.core.logging import clear_context, configure_logging
from tutor.core.settings import clear_settings_cache
from tutor.framework.registry import LessonDescriptor, LessonRegistry, get_registry


class RecordingRunnable:
    """LessonRunnable that records how often it was invoked."""

    def __init__(self, output: str | None = None) -> None:
        self.calls = 0
        self.output = output

    def invoke(self) -> None:
        self.calls += 1
        if self.output is not None:
            print(self.output)


class ExplodingRunnable:
    """LessonRunnable whose body fails."""

    def invoke(self) -> None:
        raise RuntimeError("lesson body failed")


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Quiet JSON logging on stderr, fresh settings, no bound log context."""
    monkeypatch.delenv("TUTOR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TUTOR_LOG_JSON", raising=False)
    clear_settings_cache()
    clear_context()
    configure_logging(level="WARNING", json_format=True)
    yield
    clear_settings_cache()
    clear_context()


@pytest.fixture
def make_lesson() -> Callable[..., LessonDescriptor]:
    """Factory for descriptors with a fresh RecordingRunnable."""

    def _make(number: int, slug: str, title: str = "", output: str | None = None) -> LessonDescriptor:
        return LessonDescriptor(
            number=number,
            slug=slug,
            title=title or slug.replace("_", " ").title(),
            run=RecordingRunnable(output),
        )

    return _make


@pytest.fixture
def hello_registry(make_lesson) -> LessonRegistry:
    """Registry containing just ``{number=1, slug="hello_world"}``."""
    return LessonRegistry([make_lesson(1, "hello_world", "Hello, world", output="hello from lesson 1")])


@pytest.fixture
def small_registry(make_lesson) -> LessonRegistry:
    """Out-of-order numbers, plus a slug that looks like another lesson's number."""
    return LessonRegistry(
        [
            make_lesson(3, "types", "Types"),
            make_lesson(1, "hello_world", "Hello, world"),
            make_lesson(7, "borrowing", "Borrowing"),
            make_lesson(12, "7", "Slug that parses as a number"),
        ]
    )


@pytest.fixture(scope="session")
def builtin_registry() -> LessonRegistry:
    """The real registry of every shipped lesson."""
    return get_registry()


@pytest.fixture
def exploding_lesson() -> LessonDescriptor:
    """Descriptor whose body raises RuntimeError."""
    return LessonDescriptor(number=9, slug="explodes", title="Explodes", run=ExplodingRunnable())
