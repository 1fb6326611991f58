"""
# Methods, classmethods & staticmethods

Goal: attach behaviour to classes.

Key points:
- Instance methods receive ``self``
- ``@classmethod`` receives the class; the idiom for alternative constructors
- ``@staticmethod`` receives nothing implicit
- ``@property`` exposes computed attributes
- Returning ``self`` enables method chaining
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Rectangle:
    width: float
    height: float

    @classmethod
    def square(cls, size: float) -> Rectangle:
        return cls(size, size)

    @property
    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    def can_hold(self, other: Rectangle) -> bool:
        return self.width > other.width and self.height > other.height

    def scale(self, factor: float) -> Rectangle:
        self.width *= factor
        self.height *= factor
        return self


@dataclass
class Circle:
    radius: float

    def area(self) -> float:
        return math.pi * self.radius**2

    @staticmethod
    def unit_area() -> float:
        return math.pi


@dataclass
class Point:
    x: float
    y: float

    @classmethod
    def origin(cls) -> Point:
        return cls(0.0, 0.0)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


def run() -> None:
    print("=== Method calls ===")
    rect1 = Rectangle(30, 50)
    rect2 = Rectangle(10, 40)
    rect3 = Rectangle(60, 45)
    print(f"area of {rect1} is {rect1.area}")
    print(f"perimeter is {rect1.perimeter()}")
    print(f"rect1 can hold rect2? {rect1.can_hold(rect2)}")
    print(f"rect1 can hold rect3? {rect1.can_hold(rect3)}")

    print("\n=== Class methods ===")
    square = Rectangle.square(3)
    print(f"Rectangle.square(3) = {square}")
    print(f"distance from origin to (3, 4): {Point.origin().distance_to(Point(3, 4))}")

    print("\n=== Static methods ===")
    print(f"Circle.unit_area() = {Circle.unit_area():.5f}")
    print(f"Circle(2).area()   = {Circle(2).area():.5f}")

    print("\n=== Method chaining ===")
    print(f"Rectangle(1, 2).scale(2).scale(3) = {Rectangle(1, 2).scale(2).scale(3)}")

    print("\n=== Bound vs unbound ===")
    bound = rect1.perimeter
    print(f"bound method: {bound()}; via class: {Rectangle.perimeter(rect1)}")
