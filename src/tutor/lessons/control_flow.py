"""
# if / for / while / match

Goal: branch and loop.

Key points:
- ``if`` / ``elif`` / ``else``; conditional expressions ``a if cond else b``
- ``for`` iterates any iterable; ``range`` produces integers lazily
- ``while`` with ``break`` / ``continue``; loops accept an ``else`` clause
- ``match`` (3.10+) does structural pattern matching

Common pitfalls:
- The loop ``else`` runs when the loop was *not* broken out of
- ``match`` capture names bind, they do not compare: use dotted names or literals
"""


def classify(number: int) -> str:
    if number < 0:
        return "negative"
    elif number == 0:
        return "zero"
    elif number % 2 == 0:
        return "even"
    else:
        return "odd"


def describe_point(point: tuple[int, int]) -> str:
    match point:
        case (0, 0):
            return "origin"
        case (0, y):
            return f"on the y axis at {y}"
        case (x, 0):
            return f"on the x axis at {x}"
        case (x, y) if x == y:
            return f"on the diagonal at {x}"
        case _:
            return f"somewhere at {point}"


def run() -> None:
    print("=== if expressions ===")
    demo_if()

    print("\n=== while with break ===")
    demo_while()

    print("\n=== for loops ===")
    demo_for()

    print("\n=== match ===")
    demo_match()


def demo_if() -> None:
    for number in (-3, 0, 6, 7):
        print(f"{number} is {classify(number)}")
    condition = True
    value = 5 if condition else 6
    print(f"conditional expression gives {value}")


def demo_while() -> None:
    counter = 0
    while True:
        counter += 1
        if counter == 10:
            break
    print(f"loop broke with counter = {counter}, result = {counter * 2}")

    number = 3
    while number != 0:
        print(f"{number}!")
        number -= 1
    print("LIFTOFF!!!")


def demo_for() -> None:
    for element in [10, 20, 30, 40, 50]:
        print(f"the value is: {element}")
    for number in reversed(range(1, 4)):
        print(f"{number}...")

    for candidate in (4, 6, 8):
        if candidate % 2:
            print(f"found an odd number: {candidate}")
            break
    else:
        print("no odd number found (loop else ran)")


def demo_match() -> None:
    for point in ((0, 0), (0, 5), (3, 0), (2, 2), (1, 7)):
        print(f"{point} is {describe_point(point)}")
