"""Render the lesson registry as a plain, stable table."""

from __future__ import annotations

import typer

from tutor.framework.registry import LessonRegistry

SLUG_WIDTH = 24


def format_lesson_line(number: int, slug: str, title: str) -> str:
    """``07  borrowing                References, Aliasing & Copies``"""
    return f"{number:02}  {slug:<{SLUG_WIDTH}} {title}"


def format_listing(registry: LessonRegistry) -> list[str]:
    """One line per lesson, in registry (declaration) order."""
    return [format_lesson_line(lesson.number, lesson.slug, lesson.title) for lesson in registry]


def render_listing(registry: LessonRegistry) -> None:
    """Write the listing to standard output."""
    for line in format_listing(registry):
        typer.echo(line)
