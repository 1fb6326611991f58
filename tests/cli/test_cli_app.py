"""Tests for tutor.cli: end-to-end command behaviour via CliRunner.

Covers the whole command surface: no argument, ``list``, number, slug,
unknown selector, lesson failures, and which stream each part lands on.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tutor.cli.app import USAGE, app
from tutor.framework.registry import LessonRegistry

runner = CliRunner()


@pytest.fixture
def use_registry():
    """Swap the process registry for a synthetic one."""

    def _use(registry: LessonRegistry):
        return patch("tutor.cli.app.get_registry", return_value=registry)

    return _use


class TestNoArgument:
    def test_prints_usage_and_exits_zero(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "Usage:" in result.stderr
        assert "tutor list" in result.stderr

    def test_usage_not_on_stdout(self):
        result = runner.invoke(app, [])
        assert result.stdout == ""

    def test_runs_nothing(self, hello_registry, use_registry):
        with use_registry(hello_registry):
            runner.invoke(app, [])
        assert hello_registry[0].run.calls == 0


class TestList:
    def test_lists_builtin_lessons(self):
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "01  hello_world              Hello, world & Project Layout" in result.stdout
        assert "07  borrowing" in result.stdout
        assert "19  macros_basics" in result.stdout

    def test_nothing_on_stderr(self):
        result = runner.invoke(app, ["list"])
        assert result.stderr == ""

    def test_registry_order(self, small_registry, use_registry):
        with use_registry(small_registry):
            result = runner.invoke(app, ["list"])
        numbers = [line[:2] for line in result.stdout.splitlines()]
        assert numbers == ["03", "01", "07", "12"]

    def test_stable_output(self):
        first = runner.invoke(app, ["list"]).stdout
        second = runner.invoke(app, ["list"]).stdout
        assert first == second

    def test_list_does_not_run_lessons(self, small_registry, use_registry):
        with use_registry(small_registry):
            runner.invoke(app, ["list"])
        assert all(lesson.run.calls == 0 for lesson in small_registry)


class TestRunLesson:
    def test_by_number(self, hello_registry, use_registry):
        with use_registry(hello_registry):
            result = runner.invoke(app, ["1"])
        assert result.exit_code == 0
        assert result.stdout == "hello from lesson 1\n"
        assert result.stderr == ""
        assert hello_registry[0].run.calls == 1

    def test_by_slug(self, hello_registry, use_registry):
        with use_registry(hello_registry):
            result = runner.invoke(app, ["hello_world"])
        assert result.exit_code == 0
        assert hello_registry[0].run.calls == 1

    def test_numeric_precedence(self, small_registry, use_registry):
        with use_registry(small_registry):
            result = runner.invoke(app, ["7"])
        assert result.exit_code == 0
        runs = {lesson.slug: lesson.run.calls for lesson in small_registry}
        assert runs["borrowing"] == 1
        assert runs["7"] == 0

    def test_extra_tokens_ignored(self, hello_registry, use_registry):
        with use_registry(hello_registry):
            result = runner.invoke(app, ["1", "ignored"])
        assert result.exit_code == 0
        assert hello_registry[0].run.calls == 1

    def test_real_lesson_by_slug(self):
        result = runner.invoke(app, ["hello_world"])
        assert result.exit_code == 0
        assert "Hello, Python learner!" in result.stdout

    def test_real_lesson_by_padded_number(self):
        result = runner.invoke(app, ["07"])
        assert result.exit_code == 0
        assert "=== Read-only use ===" in result.stdout


class TestUnknownSelector:
    @pytest.mark.parametrize("token", ["999", "nonexistent_slug", "Hello_World", "-1", "--help", "--"])
    def test_error_usage_exit_one(self, token):
        result = runner.invoke(app, [token])
        assert result.exit_code == 1
        assert f"Error: Lesson '{token}' not found" in result.stderr
        assert "Usage:" in result.stderr
        assert result.stdout == ""

    def test_error_precedes_usage(self):
        stderr = runner.invoke(app, ["nope"]).stderr
        assert stderr.index("not found") < stderr.index("Usage:")

    def test_markup_in_selector_printed_literally(self):
        result = runner.invoke(app, ["[bold]x[/bold]"])
        assert result.exit_code == 1
        assert "Lesson '[bold]x[/bold]' not found" in result.stderr

    def test_nothing_runs(self, small_registry, use_registry):
        with use_registry(small_registry):
            runner.invoke(app, ["missing"])
        assert all(lesson.run.calls == 0 for lesson in small_registry)

    def test_double_dash_is_the_selector(self, hello_registry, use_registry):
        """``--`` is not an end-of-options marker; the lesson after it never runs."""
        with use_registry(hello_registry):
            result = runner.invoke(app, ["--", "1"])
        assert result.exit_code == 1
        assert "Error: Lesson '--' not found" in result.stderr
        assert hello_registry[0].run.calls == 0


class TestLessonFailure:
    def test_exception_propagates(self, exploding_lesson, use_registry):
        with use_registry(LessonRegistry([exploding_lesson])):
            result = runner.invoke(app, ["explodes"])
        assert result.exit_code != 0
        assert isinstance(result.exception, RuntimeError)
        assert "not found" not in result.stderr


class TestUsageText:
    def test_usage_examples_resolve(self, builtin_registry):
        from tutor.framework.resolver import find_lesson

        assert "tutor hello_world" in USAGE
        assert find_lesson("hello_world", builtin_registry) is not None
        assert find_lesson("1", builtin_registry) is not None


class TestLogging:
    def test_debug_logs_on_stderr_only(self, monkeypatch, hello_registry, use_registry):
        monkeypatch.setenv("TUTOR_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("TUTOR_LOG_JSON", "true")
        with use_registry(hello_registry):
            result = runner.invoke(app, ["1"])
        assert result.exit_code == 0
        assert '"event": "lesson.completed"' in result.stderr
        assert "lesson.completed" not in result.stdout
        assert result.stdout == "hello from lesson 1\n"


class TestInvalidSettings:
    """A bad ``TUTOR_*`` value degrades to default logging, never a crash."""

    def test_bad_log_level_still_lists(self, monkeypatch):
        monkeypatch.setenv("TUTOR_LOG_LEVEL", "verbose")
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "01  hello_world" in result.stdout
        assert "settings.invalid" in result.stderr

    def test_bad_dotenv_still_runs_lesson(self, monkeypatch, tmp_path, hello_registry, use_registry):
        (tmp_path / ".env").write_text("TUTOR_LOG_JSON=maybe\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        with use_registry(hello_registry):
            result = runner.invoke(app, ["1"])
        assert result.exit_code == 0
        assert result.stdout == "hello from lesson 1\n"
        assert hello_registry[0].run.calls == 1

    def test_bad_settings_without_argument_prints_usage(self, monkeypatch):
        monkeypatch.setenv("TUTOR_LOG_LEVEL", "loud")
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "Usage:" in result.stderr
