"""
# Functions & Parameters

Goal: define functions and use Python's parameter kinds.

Key points:
- ``def`` creates a function object; ``return`` without a value returns ``None``
- Parameters may be positional, keyword, defaulted, ``*args`` and ``**kwargs``
- ``/`` marks positional-only and ``*`` keyword-only parameters
- Functions are first-class values
"""


def greet(name: str) -> None:
    print(f"Hello, {name}!")


def add(a: int, b: int) -> int:
    return a + b


def multiply(x: int, y: int) -> int:
    return x * y


def power(base: int, exp: int) -> int:
    result = 1
    for _ in range(exp):
        result *= base
    return result


def rectangle_area(width: int, height: int) -> int:
    return width * height


def describe_call(*args, sep: str = ", ", **kwargs) -> str:
    parts = [repr(a) for a in args] + [f"{k}={v!r}" for k, v in kwargs.items()]
    return sep.join(parts)


def clamp(value: float, /, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def run() -> None:
    print("=== Function basics ===")
    greet("Alice")
    print(f"5 + 3 = {add(5, 3)}")
    print(f"4 * 7 = {multiply(4, 7)}")
    print(f"2 ^ 10 = {power(2, 10)}")
    print(f"area of 8 x 5 = {rectangle_area(8, 5)}")

    print("\n=== Parameter kinds ===")
    print(f"describe_call(1, 2, x=3) -> {describe_call(1, 2, x=3)}")
    print(f"describe_call('a', sep=' | ', y=None) -> {describe_call('a', 'b', sep=' | ', y=None)}")
    print(f"clamp(1.7) -> {clamp(1.7)}")
    print(f"clamp(-5, low=-1) -> {clamp(-5, low=-1)}")

    print("\n=== Functions as values ===")
    ops = {"add": add, "mul": multiply}
    for name, op in ops.items():
        print(f"{name}(6, 7) = {op(6, 7)}")
    print(f"greet returns {greet('Bob')!r}")
