"""
# Dataclasses & replace()

Goal: group related data with ``dataclasses``.

Key points:
- ``@dataclass`` generates ``__init__``, ``__repr__`` and ``__eq__``
- ``frozen=True`` makes instances immutable (and hashable)
- ``dataclasses.replace`` builds a modified copy ("struct update")
- ``NamedTuple`` is the tuple-flavoured alternative
- ``field(default_factory=...)`` gives each instance its own mutable default
"""

from dataclasses import asdict, dataclass, field, replace
from typing import NamedTuple


@dataclass
class User:
    username: str
    email: str
    sign_in_count: int = 1
    active: bool = True
    roles: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Rectangle:
    width: int
    height: int

    def area(self) -> int:
        return self.width * self.height


class Color(NamedTuple):
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class AlwaysEqual:
    pass


def build_user(email: str, username: str) -> User:
    return User(username=username, email=email)


def run() -> None:
    print("=== Named fields ===")
    demo_named_structs()

    print("\n=== Tuple-like records ===")
    black = Color(0, 0, 0)
    r, g, b = black
    print(f"{black}: r={r}, g={g}, b={b}, black.g={black.g}")

    print("\n=== Field-less classes ===")
    print(f"AlwaysEqual() == AlwaysEqual(): {AlwaysEqual() == AlwaysEqual()}")

    print("\n=== replace() ===")
    demo_struct_update()


def demo_named_structs() -> None:
    user1 = build_user("someone@example.com", "someusername123")
    print(user1)
    user1.email = "anotheremail@example.com"
    print(f"email changed: {user1.email}")
    print(f"as dict: {asdict(user1)}")

    rect = Rectangle(width=30, height=50)
    print(f"{rect} has area {rect.area()}")
    try:
        rect.width = 10  # type: ignore[misc]
    except AttributeError as e:
        print(f"frozen dataclass refused assignment: {type(e).__name__}")


def demo_struct_update() -> None:
    user1 = build_user("a@example.com", "alpha")
    user2 = replace(user1, email="b@example.com")
    print(f"user1: {user1}")
    print(f"user2: {user2}")
    print(f"replace() copies shallowly, roles list shared: {user1.roles is user2.roles}")
