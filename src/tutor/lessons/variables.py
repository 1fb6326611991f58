"""
# Variables & Mutability

Goal: understand that Python names are bindings, and which objects can change.

Key points:
- Assignment binds a name to an object; rebinding never changes the old object
- ``int``, ``str``, ``tuple`` and ``frozenset`` are immutable
- ``list``, ``dict`` and ``set`` are mutable and change in place
- UPPER_CASE names are constants by convention only
- ``global`` / ``nonlocal`` are needed to rebind names from outer scopes

Common pitfalls:
- Mutable default arguments are shared across calls
- ``a = b = []`` makes two names for one list
"""

MAX_POINTS = 100_000


def append_good(item, bucket=None):
    if bucket is None:
        bucket = []
    bucket.append(item)
    return bucket


def make_counter():
    count = 0

    def increment() -> int:
        nonlocal count
        count += 1
        return count

    return increment


def run() -> None:
    print("=== Binding & rebinding ===")
    x = 5
    print(f"The value of x is: {x}")
    x = 6
    print(f"The value of x is now: {x}")

    print("\n=== Shadowing by rebinding ===")
    spaces = "   "
    spaces = len(spaces)
    print(f"spaces went from str to int: {spaces}")

    print("\n=== Constants ===")
    print(f"MAX_POINTS = {MAX_POINTS:,}")

    demo_mutability()

    print("\n=== Mutable default arguments ===")

    def append_bad(item, bucket=[]):  # noqa: B006
        bucket.append(item)
        return bucket

    print(f"append_bad(1)  -> {append_bad(1)}")
    print(f"append_bad(2)  -> {append_bad(2)}   # same list reused!")
    print(f"append_good(1) -> {append_good(1)}")
    print(f"append_good(2) -> {append_good(2)}")

    print("\n=== nonlocal ===")
    counter = make_counter()
    counter()
    print(f"counter called twice -> {counter()}")


def demo_mutability() -> None:
    print("\n=== Mutable vs immutable ===")
    text = "hello"
    upper = text.upper()
    print(f"str methods return new objects: {text!r} -> {upper!r}")

    items = [1, 2, 3]
    before = id(items)
    items.append(4)
    print(f"list changed in place: {items} (same object: {id(items) == before})")
