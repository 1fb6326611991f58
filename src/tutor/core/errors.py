"""
Structured error types for tutor.

Every error the lesson runner raises on purpose extends :class:`TutorError`
and carries a category plus a small context mapping, so the CLI layer can
report it once on stderr and structured logs can serialise it with
:meth:`TutorError.to_dict`.

Manifesto:
    - **Typed errors:** one class per failure the core can actually produce
    - **Exact context:** errors keep the input that caused them verbatim
    - **Lessons are trusted:** anything raised inside a lesson body is not
      part of this hierarchy and is never wrapped

Architecture:
    ::

        TutorError (category, context)
        ├── SelectionNotFoundError   (SELECTION)  selector matched nothing
        └── RegistryError            (REGISTRY)   duplicate / invalid descriptor

Examples:
    >>> err = SelectionNotFoundError("999")
    >>> str(err)
    "Lesson '999' not found"
    >>> err.selector
    '999'
    >>> err.to_dict()["category"]
    'SELECTION'

Tags:
    error-handling, exception-hierarchy, tutor-core

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and log routing."""

    SELECTION = "SELECTION"
    REGISTRY = "REGISTRY"
    INTERNAL = "INTERNAL"

    def __str__(self) -> str:
        return self.value


class TutorError(Exception):
    """
    Base exception for all tutor errors.

    Subclasses set ``default_category``; callers may attach extra metadata
    through ``context=`` or the fluent :meth:`with_context`.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context: dict[str, Any] = dict(context or {})
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> TutorError:
        """Add context to this error (fluent API)."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialise for structured logging."""
        result: dict[str, Any] = {
            "error_type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = repr(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, category={self.category.value})"


class SelectionNotFoundError(TutorError):
    """No lesson matches the selector, neither by number nor by slug.

    The offending selector is kept exactly as the user typed it.
    """

    default_category = ErrorCategory.SELECTION

    def __init__(self, selector: str, **kwargs: Any):
        self.selector = selector
        super().__init__(f"Lesson '{selector}' not found", **kwargs)
        self.context.setdefault("selector", selector)

    def __repr__(self) -> str:
        return f"SelectionNotFoundError({self.selector!r})"


class RegistryError(TutorError):
    """A lesson registry was declared with duplicate or invalid descriptors."""

    default_category = ErrorCategory.REGISTRY


__all__ = [
    "ErrorCategory",
    "TutorError",
    "SelectionNotFoundError",
    "RegistryError",
]
