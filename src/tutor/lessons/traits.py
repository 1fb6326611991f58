"""
# Protocols & Abstract Base Classes

Goal: describe shared behaviour across unrelated classes.

Key points:
- ``abc.ABC`` + ``@abstractmethod``: nominal interfaces, enforced at instantiation
- Abstract classes can provide default method implementations
- ``typing.Protocol``: structural interfaces, no inheritance needed
- ``@runtime_checkable`` enables ``isinstance`` checks against a protocol
- Dunder methods (``__str__``, ``__eq__``, ``__len__``) hook into built-in behaviour
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


class Summary(ABC):
    @abstractmethod
    def summarize_author(self) -> str: ...

    def summarize(self) -> str:
        return f"(Read more from {self.summarize_author()}...)"


@dataclass
class NewsArticle(Summary):
    headline: str
    location: str
    author: str

    def summarize_author(self) -> str:
        return self.author

    def summarize(self) -> str:
        return f"{self.headline}, by {self.author} ({self.location})"


@dataclass
class Tweet(Summary):
    username: str
    content: str

    def summarize_author(self) -> str:
        return f"@{self.username}"


@runtime_checkable
class Displayable(Protocol):
    def display(self) -> str: ...


@dataclass
class Badge:
    label: str

    def display(self) -> str:
        return f"[{self.label}]"


def notify(item: Summary) -> str:
    return f"Breaking news! {item.summarize()}"


def render_all(items: list[Displayable]) -> str:
    return " ".join(item.display() for item in items)


def run() -> None:
    print("=== Implementing an interface ===")
    tweet = Tweet("horse_ebooks", "of course, as you probably already know, people")
    article = NewsArticle("Penguins win the Stanley Cup", "Pittsburgh", "Iceburgh")
    print(f"1 new tweet: {tweet.summarize()}")
    print(f"New article: {article.summarize()}")

    print("\n=== Abstract methods are enforced ===")
    try:
        Summary()  # type: ignore[abstract]
    except TypeError as e:
        print(f"TypeError: {e}")

    print("\n=== Interfaces as parameters ===")
    print(notify(tweet))

    print("\n=== Structural protocols ===")
    badges = [Badge("python"), Badge("tutor")]
    print(render_all(badges))
    print(f"isinstance(Badge('x'), Displayable) = {isinstance(Badge('x'), Displayable)}")
    print(f"isinstance(tweet, Displayable)      = {isinstance(tweet, Displayable)}")
