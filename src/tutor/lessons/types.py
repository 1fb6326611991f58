"""
# Scalar & Compound Types

Goal: meet Python's built-in types and how type annotations describe them.

Key points:
- Scalars: ``int`` (arbitrary precision), ``float``, ``complex``, ``bool``, ``str``
- ``bool`` is a subclass of ``int``
- Compound: ``tuple`` (fixed, immutable), ``list``, ``dict``, ``set``
- Annotations document intent; they are not enforced at runtime
"""


def describe(value: object) -> str:
    return f"{value!r:<22} -> {type(value).__name__}"


def run() -> None:
    demo_scalar_types()
    demo_compound_types()
    demo_type_inference()


def demo_scalar_types() -> None:
    print("=== Scalar types ===")
    for value in (42, 2**100, 3.14, 1 + 2j, True, "🐍"):
        print(f"  {describe(value)}")

    print(f"  True + True = {True + True}")
    print(f"  0.1 + 0.2 == 0.3 ? {0.1 + 0.2 == 0.3}")
    print(f"  7 // 2 = {7 // 2}, 7 / 2 = {7 / 2}, -7 // 2 = {-7 // 2}")


def demo_compound_types() -> None:
    print("\n=== Compound types ===")
    tup: tuple[int, float, str] = (500, 6.4, "one")
    x, y, z = tup
    print(f"  tuple {tup}: unpacked x={x}, y={y}, z={z!r}, tup[0]={tup[0]}")

    arr: list[int] = [1, 2, 3, 4, 5]
    print(f"  list {arr}: first={arr[0]}, last={arr[-1]}, len={len(arr)}")

    months = {"jan": 1, "feb": 2}
    print(f"  dict {months}: feb={months['feb']}")

    unique = {3, 1, 3, 2}
    print(f"  set  {sorted(unique)}")


def demo_type_inference() -> None:
    print("\n=== Conversions & annotations ===")
    guess: int = int("42")
    print(f"  int('42') = {guess}")
    print(f"  float('2.5') = {float('2.5')}")
    print(f"  str(99) = {str(99)!r}")
    print(f"  annotations of describe(): {describe.__annotations__}")
