"""Selector resolution: map the user's token to exactly one lesson.

Resolution is two-phase and first-match in registry order:

1. If the selector is all ASCII digits, look for a lesson with that
   number. A numeric match wins even when another lesson's slug is the
   literal selector text.
2. Otherwise, or when no lesson has that number, look for a lesson whose
   slug equals the selector exactly (case-sensitive, untrimmed).

Leading zeros are accepted (``"07"`` is lesson 7, matching what ``list``
prints). Signs, whitespace, underscores and non-ASCII digits are not
numbers, so ``"-1"`` or ``" 1"`` only ever match as slugs.
"""

from __future__ import annotations

from tutor.core.errors import SelectionNotFoundError
from tutor.core.logging import get_logger
from tutor.framework.registry import LessonDescriptor, LessonRegistry

logger = get_logger(__name__)

_ASCII_DIGITS = frozenset("0123456789")


def parse_lesson_number(selector: str) -> int | None:
    """Return the selector as a non-negative int, or None if it is not a plain decimal."""
    if not selector or not set(selector) <= _ASCII_DIGITS:
        return None
    return int(selector)


def find_lesson(selector: str, registry: LessonRegistry) -> LessonDescriptor | None:
    """Resolve a selector, returning None when nothing matches."""
    number = parse_lesson_number(selector)
    if number is not None:
        for lesson in registry:
            if lesson.number == number:
                logger.debug("selector.resolved", selector=selector, by="number", slug=lesson.slug)
                return lesson

    for lesson in registry:
        if lesson.slug == selector:
            logger.debug("selector.resolved", selector=selector, by="slug", number=lesson.number)
            return lesson

    return None


def resolve_selector(selector: str, registry: LessonRegistry) -> LessonDescriptor:
    """Resolve a selector, raising if nothing matches.

    Raises:
        SelectionNotFoundError: carrying ``selector`` verbatim.
    """
    lesson = find_lesson(selector, registry)
    if lesson is None:
        logger.info("selector.not_found", selector=selector)
        raise SelectionNotFoundError(selector)
    return lesson
