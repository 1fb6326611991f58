"""
# Enums & Pattern Matching

Goal: model a closed set of variants and branch on them.

Key points:
- ``enum.Enum`` members are singletons; ``auto()`` assigns values
- Variants carrying data: small dataclasses combined in a union type
- ``match`` destructures class instances with ``Class(attr=pattern)``
- ``Optional[T]`` / ``T | None`` plays the role of an "option" type
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class IpAddrKind(Enum):
    V4 = auto()
    V6 = auto()


@dataclass(frozen=True)
class IpAddr:
    kind: IpAddrKind
    address: str


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Move:
    x: int
    y: int


@dataclass(frozen=True)
class Write:
    text: str


@dataclass(frozen=True)
class ChangeColor:
    r: int
    g: int
    b: int


Message = Quit | Move | Write | ChangeColor


class Coin(Enum):
    PENNY = 1
    NICKEL = 5
    DIME = 10
    QUARTER = 25


def value_in_cents(coin: Coin) -> int:
    return coin.value


def describe_message(message: Message) -> str:
    match message:
        case Quit():
            return "quit"
        case Move(x=0, y=0):
            return "move nowhere"
        case Move(x=x, y=y):
            return f"move to ({x}, {y})"
        case Write(text=text):
            return f"write {text!r}"
        case ChangeColor(r=r, g=g, b=b):
            return f"change color to #{r:02x}{g:02x}{b:02x}"
    raise TypeError(f"unknown message: {message!r}")


def plus_one(x: int | None) -> int | None:
    return None if x is None else x + 1


def run() -> None:
    print("=== Basic enums ===")
    for kind in IpAddrKind:
        print(f"{kind} (name={kind.name}, value={kind.value})")

    print("\n=== Variants with data ===")
    home = IpAddr(IpAddrKind.V4, "127.0.0.1")
    loopback = IpAddr(IpAddrKind.V6, "::1")
    print(home)
    print(loopback)

    print("\n=== Optional values ===")
    print(f"plus_one(5) = {plus_one(5)}, plus_one(None) = {plus_one(None)}")

    print("\n=== Pattern matching ===")
    for message in (Quit(), Move(0, 0), Move(3, 4), Write("hi"), ChangeColor(255, 128, 0)):
        print(f"{message!r:<40} -> {describe_message(message)}")

    print("\n=== Enum values ===")
    for coin in Coin:
        print(f"{coin.name:<8} = {value_in_cents(coin)} cents")
