"""
# Hello, world & Project Layout

Goal: see the smallest useful Python program and where code lives.

Key points:
- A module runs top to bottom; ``if __name__ == "__main__":`` guards script entry
- ``print`` is an ordinary function
- f-strings interpolate expressions in ``{}``
- A package is a directory with ``__init__.py``; ``src/`` holds importable code

Run:
    tutor hello_world
"""


def add(a: int, b: int) -> int:
    return a + b


def run() -> None:
    print("Hello, Python learner! 🐍")
    print(f"1 + 2 = {add(1, 2)}")

    name = "Python"
    print(f"Welcome to {name} programming!")

    print("\n=== Project layout ===")
    for line in (
        "pyproject.toml        # metadata, dependencies, entry points",
        "src/tutor/__init__.py # the importable package",
        "src/tutor/__main__.py # `python -m tutor`",
        "tests/                # pytest test suite",
    ):
        print(f"  {line}")
