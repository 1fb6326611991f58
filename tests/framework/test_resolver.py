"""
Tests for selector resolution.

Tests verify:
- Numeric and slug lookup for every built-in lesson
- Numeric precedence over a slug that looks like a number
- The numeric parsing policy (ASCII digits, leading zeros accepted, no sign)
- Not-found carries the exact selector
"""

from __future__ import annotations

import pytest

from tutor.core.errors import SelectionNotFoundError
from tutor.framework.resolver import find_lesson, parse_lesson_number, resolve_selector


class TestParseLessonNumber:
    @pytest.mark.parametrize(
        ("selector", "expected"),
        [("1", 1), ("19", 19), ("01", 1), ("007", 7), ("0", 0), ("999", 999)],
    )
    def test_plain_decimals(self, selector, expected):
        assert parse_lesson_number(selector) == expected

    @pytest.mark.parametrize(
        "selector",
        ["", "-1", "+1", " 1", "1 ", "1_0", "1.0", "0x1", "one", "١", "²", "hello_world"],
    )
    def test_everything_else_is_not_a_number(self, selector):
        assert parse_lesson_number(selector) is None


class TestBuiltinLookups:
    def test_every_lesson_resolves_by_number(self, builtin_registry):
        for lesson in builtin_registry:
            assert resolve_selector(str(lesson.number), builtin_registry) is lesson

    def test_every_lesson_resolves_by_slug(self, builtin_registry):
        for lesson in builtin_registry:
            assert resolve_selector(lesson.slug, builtin_registry) is lesson

    def test_zero_padded_number_from_listing(self, builtin_registry):
        assert resolve_selector("07", builtin_registry).slug == "borrowing"


class TestHelloWorldScenario:
    """Registry of ``{number=1, slug="hello_world"}``."""

    def test_by_number(self, hello_registry):
        assert resolve_selector("1", hello_registry) is hello_registry[0]

    def test_by_slug(self, hello_registry):
        assert resolve_selector("hello_world", hello_registry) is hello_registry[0]

    def test_leading_zero_accepted(self, hello_registry):
        assert resolve_selector("01", hello_registry) is hello_registry[0]

    @pytest.mark.parametrize("selector", ["-1", "+1", " 1", "1 "])
    def test_signed_or_padded_not_accepted(self, hello_registry, selector):
        with pytest.raises(SelectionNotFoundError) as exc:
            resolve_selector(selector, hello_registry)
        assert exc.value.selector == selector

    def test_slug_is_case_sensitive(self, hello_registry):
        assert find_lesson("Hello_World", hello_registry) is None

    def test_slug_is_not_trimmed(self, hello_registry):
        assert find_lesson(" hello_world", hello_registry) is None


class TestPrecedence:
    def test_numeric_match_beats_numeric_looking_slug(self, small_registry):
        lesson = resolve_selector("7", small_registry)
        assert lesson.number == 7
        assert lesson.slug == "borrowing"

    def test_slug_used_when_number_absent(self, make_lesson):
        from tutor.framework.registry import LessonRegistry

        registry = LessonRegistry([make_lesson(1, "hello_world"), make_lesson(2, "42")])
        assert resolve_selector("42", registry).number == 2

    def test_registry_order_not_number_order(self, small_registry):
        assert resolve_selector("3", small_registry).slug == "types"
        assert resolve_selector("12", small_registry).slug == "7"


class TestNotFound:
    def test_unknown_number(self, hello_registry):
        with pytest.raises(SelectionNotFoundError) as exc:
            resolve_selector("999", hello_registry)
        assert exc.value.selector == "999"
        assert str(exc.value) == "Lesson '999' not found"

    def test_unknown_slug(self, hello_registry):
        with pytest.raises(SelectionNotFoundError) as exc:
            resolve_selector("nonexistent_slug", hello_registry)
        assert exc.value.selector == "nonexistent_slug"
        assert exc.value.context == {"selector": "nonexistent_slug"}

    def test_empty_selector(self, hello_registry):
        with pytest.raises(SelectionNotFoundError) as exc:
            resolve_selector("", hello_registry)
        assert exc.value.selector == ""

    def test_find_returns_none(self, hello_registry):
        assert find_lesson("nope", hello_registry) is None

    def test_resolution_never_runs_the_lesson(self, hello_registry):
        resolve_selector("1", hello_registry)
        assert hello_registry[0].run.calls == 0
