"""Lesson framework: registry, selector resolution, listing, dispatch."""

from tutor.framework.dispatcher import LessonDispatcher, LessonExecution
from tutor.framework.lister import format_lesson_line, format_listing, render_listing
from tutor.framework.registry import (
    LessonDescriptor,
    LessonRegistry,
    build_registry,
    get_registry,
)
from tutor.framework.resolver import find_lesson, parse_lesson_number, resolve_selector

__all__ = [
    "LessonDescriptor",
    "LessonRegistry",
    "build_registry",
    "get_registry",
    "parse_lesson_number",
    "find_lesson",
    "resolve_selector",
    "format_lesson_line",
    "format_listing",
    "render_listing",
    "LessonDispatcher",
    "LessonExecution",
]
