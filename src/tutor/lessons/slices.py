"""
# String & List Slices

Goal: take parts of sequences with slice syntax.

Key points:
- ``seq[start:stop:step]``; ``stop`` is exclusive, indices may be negative
- Slicing a ``str`` / ``list`` / ``tuple`` creates a new object
- Out-of-range slices are clipped instead of raising
- Slice assignment replaces part of a list in place
- ``memoryview`` slices ``bytes`` / ``bytearray`` without copying
"""


def first_word(s: str) -> str:
    index = s.find(" ")
    return s if index == -1 else s[:index]


def first_n(arr: list[int], n: int) -> list[int]:
    return arr[:n]


def second_half(arr: list[int]) -> list[int]:
    return arr[len(arr) // 2:]


def run() -> None:
    print("=== String slices ===")
    demo_string_slices()

    print("\n=== List slices ===")
    demo_list_slices()

    print("\n=== Slices as parameters ===")
    print(f"first word of 'hello world': {first_word('hello world')!r}")
    print(f"first word of 'single': {first_word('single')!r}")

    print("\n=== Slice assignment & memoryview ===")
    demo_other_slices()


def demo_string_slices() -> None:
    s = "hello world"
    print(f"s[0:5]   = {s[0:5]!r}")
    print(f"s[6:]    = {s[6:]!r}")
    print(f"s[:]     = {s[:]!r}")
    print(f"s[-5:]   = {s[-5:]!r}")
    print(f"s[::-1]  = {s[::-1]!r}")


def demo_list_slices() -> None:
    a = [1, 2, 3, 4, 5]
    print(f"a[1:3]        = {a[1:3]}")
    print(f"a[::2]        = {a[::2]}")
    print(f"a[10:20]      = {a[10:20]}  (clipped, no error)")
    print(f"first_n(a, 3) = {first_n(a, 3)}")
    print(f"second_half(a)= {second_half(a)}")


def demo_other_slices() -> None:
    numbers = [1, 2, 3, 4, 5]
    numbers[:2] = [10, 20]
    print(f"after numbers[:2] = [10, 20]: {numbers}")
    numbers[1:4] = []
    print(f"after numbers[1:4] = []:      {numbers}")

    buffer = bytearray(b"hello")
    view = memoryview(buffer)[1:3]
    view[0] = ord("a")
    print(f"memoryview write-through: {buffer.decode()}")
