"""
Lesson dispatcher: resolve one selector and run that lesson synchronously.

The dispatcher owns nothing but the registry it was given. ``submit``
resolves the selector, invokes the lesson's runnable, and returns a small
execution record. Resolution failures surface as
:class:`~tutor.core.errors.SelectionNotFoundError`; exceptions raised by
the lesson itself propagate untouched.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import UTC, datetime

from tutor.core.logging import LogContext, get_logger
from tutor.framework.registry import LessonDescriptor, LessonRegistry
from tutor.framework.resolver import resolve_selector

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LessonExecution:
    """Record of one completed lesson run."""

    lesson: LessonDescriptor
    selector: str
    started_at: datetime
    completed_at: datetime
    duration_seconds: float


class LessonDispatcher:
    """
    Dispatcher for lesson runs.

    One synchronous attempt per call: no queue, no retry, no timeout.
    """

    def __init__(self, registry: LessonRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> LessonRegistry:
        return self._registry

    def resolve(self, selector: str) -> LessonDescriptor:
        """Resolve ``selector`` against this dispatcher's registry."""
        return resolve_selector(selector, self._registry)

    def submit(self, selector: str) -> LessonExecution:
        """
        Resolve and run one lesson.

        Args:
            selector: Lesson number or slug, exactly as typed.

        Returns:
            Execution record for the completed run.

        Raises:
            SelectionNotFoundError: no lesson matches ``selector``.
        """
        return self.run(self.resolve(selector), selector=selector)

    def run(self, lesson: LessonDescriptor, *, selector: str | None = None) -> LessonExecution:
        """Invoke an already-resolved lesson and time it."""
        selector = selector if selector is not None else lesson.slug

        with LogContext(lesson=lesson.slug, number=lesson.number):
            started_at = datetime.now(UTC)
            t0 = time.perf_counter()
            log.info("lesson.started", selector=selector)

            lesson.run.invoke()

            duration = time.perf_counter() - t0
            completed_at = datetime.now(UTC)
            log.info("lesson.completed", duration_ms=round(duration * 1000, 2))

        return LessonExecution(
            lesson=lesson,
            selector=selector,
            started_at=started_at,
            completed_at=completed_at,
            duration_seconds=duration,
        )
