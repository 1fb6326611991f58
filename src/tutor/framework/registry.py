"""Lesson registry: the fixed, ordered catalog of runnable lessons.

Manifesto:
    The set of lessons is known when the package is built. The registry is
    produced by one pure builder, validated once, and then only read. No
    module-level mutable table and no import-time registration side
    effects: callers receive the registry and pass it on explicitly, which
    also makes a small synthetic registry trivial to use in tests.

Tags:
    tutor, framework, registry, lesson-discovery, lookup

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import lru_cache

from tutor.core.errors import RegistryError
from tutor.core.logging import get_logger
from tutor.core.protocols import FunctionRunnable, LessonRunnable

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LessonDescriptor:
    """Metadata for a single lesson.

    Attributes:
        number: Positive identifier used for ordering and numeric lookup.
        slug: Case-sensitive textual identifier used for name lookup.
        title: Human-readable description, display only.
        run: Zero-argument capability that performs the lesson.
    """

    number: int
    slug: str
    title: str
    run: LessonRunnable


class LessonRegistry:
    """Immutable, ordered collection of :class:`LessonDescriptor`.

    Iteration order is declaration order, which is also the listing order.
    Construction fails fast with :class:`RegistryError` when two
    descriptors share a number or a slug, or a descriptor is malformed.
    """

    __slots__ = ("_lessons",)

    def __init__(self, lessons: Iterable[LessonDescriptor]) -> None:
        items = tuple(lessons)
        _validate(items)
        self._lessons: tuple[LessonDescriptor, ...] = items

    @property
    def lessons(self) -> tuple[LessonDescriptor, ...]:
        return self._lessons

    def numbers(self) -> list[int]:
        return [lesson.number for lesson in self._lessons]

    def slugs(self) -> list[str]:
        return [lesson.slug for lesson in self._lessons]

    def __len__(self) -> int:
        return len(self._lessons)

    def __iter__(self) -> Iterator[LessonDescriptor]:
        return iter(self._lessons)

    def __getitem__(self, index: int) -> LessonDescriptor:
        return self._lessons[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LessonRegistry):
            return NotImplemented
        return self._lessons == other._lessons

    def __hash__(self) -> int:
        return hash(self._lessons)

    def __repr__(self) -> str:
        return f"LessonRegistry(lessons={len(self)})"


def _validate(lessons: tuple[LessonDescriptor, ...]) -> None:
    seen_numbers: dict[int, str] = {}
    seen_slugs: dict[str, int] = {}

    for lesson in lessons:
        if not isinstance(lesson.number, int) or isinstance(lesson.number, bool) or lesson.number < 1:
            raise RegistryError(
                f"Lesson '{lesson.slug}' has invalid number {lesson.number!r}; numbers must be positive integers",
                context={"slug": lesson.slug, "number": lesson.number},
            )
        if not lesson.slug:
            raise RegistryError(
                f"Lesson {lesson.number} has an empty slug",
                context={"number": lesson.number},
            )
        if not isinstance(lesson.run, LessonRunnable):
            raise RegistryError(
                f"Lesson '{lesson.slug}' run capability has no invoke() method",
                context={"slug": lesson.slug},
            )
        if lesson.number in seen_numbers:
            raise RegistryError(
                f"Lesson number {lesson.number} is declared twice "
                f"('{seen_numbers[lesson.number]}' and '{lesson.slug}')",
                context={"number": lesson.number},
            )
        if lesson.slug in seen_slugs:
            raise RegistryError(
                f"Lesson slug '{lesson.slug}' is declared twice "
                f"(numbers {seen_slugs[lesson.slug]} and {lesson.number})",
                context={"slug": lesson.slug},
            )
        seen_numbers[lesson.number] = lesson.slug
        seen_slugs[lesson.slug] = lesson.number


def build_registry() -> LessonRegistry:
    """Build the registry of every built-in lesson, in declaration order.

    Pure and deterministic: repeated calls return equal registries.
    """
    from tutor.lessons import (
        borrowing,
        collections,
        control_flow,
        enums_matching,
        error_handling,
        functions,
        generics,
        hello_world,
        iterators_closures,
        lifetimes,
        macros_basics,
        methods_assoc_fn,
        modules_crates,
        ownership,
        slices,
        structs,
        traits,
        types,
        variables,
    )

    # Every lesson is declared here, in listing order.
    declarations = [
        (1, "hello_world", "Hello, world & Project Layout", hello_world.run),
        (2, "variables", "Variables & Mutability", variables.run),
        (3, "types", "Scalar & Compound Types", types.run),
        (4, "functions", "Functions & Parameters", functions.run),
        (5, "control_flow", "if / for / while / match", control_flow.run),
        (6, "ownership", "Names, Objects & Reference Counting", ownership.run),
        (7, "borrowing", "References, Aliasing & Copies", borrowing.run),
        (8, "slices", "String & List Slices", slices.run),
        (9, "structs", "Dataclasses & replace()", structs.run),
        (10, "enums_matching", "Enums & Pattern Matching", enums_matching.run),
        (11, "methods_assoc_fn", "Methods, classmethods & staticmethods", methods_assoc_fn.run),
        (12, "generics", "Generics & TypeVar", generics.run),
        (13, "traits", "Protocols & Abstract Base Classes", traits.run),
        (14, "lifetimes", "Scopes, Lifetimes & Context Managers", lifetimes.run),
        (15, "collections", "list / str / dict", collections.run),
        (16, "iterators_closures", "Iterators, Generators & Closures", iterators_closures.run),
        (17, "error_handling", "Exceptions / Optional / try-except", error_handling.run),
        (18, "modules_crates", "Modules / Packages / Imports", modules_crates.run),
        (19, "macros_basics", "Decorators & Metaprogramming", macros_basics.run),
    ]

    registry = LessonRegistry(
        LessonDescriptor(number=number, slug=slug, title=title, run=FunctionRunnable(func))
        for number, slug, title, func in declarations
    )
    logger.debug("registry.built", lessons=len(registry))
    return registry


@lru_cache(maxsize=1)
def get_registry() -> LessonRegistry:
    """Return the process-wide registry, building it on first use."""
    return build_registry()
