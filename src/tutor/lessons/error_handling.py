"""
# Exceptions / Optional / try-except

Goal: signal and handle failures.

Key points:
- Return ``None`` (``T | None``) for expected absence; raise for errors
- ``try`` / ``except`` / ``else`` / ``finally``
- Exceptions propagate automatically until something handles them
- ``raise ... from ...`` chains a new exception to its cause
- Custom exception classes carry domain meaning

Common pitfalls:
- Bare ``except:`` also catches ``KeyboardInterrupt``
- Catching exceptions you cannot handle just to hide them
"""

from __future__ import annotations

from pathlib import Path

SAMPLE_FILE = "test.txt"


class InsufficientFundsError(Exception):
    def __init__(self, balance: int, requested: int) -> None:
        super().__init__(f"cannot withdraw {requested}, balance is {balance}")
        self.balance = balance
        self.requested = requested


def divide(a: float, b: float) -> float | None:
    if b == 0:
        return None
    return a / b


def find_user(user_id: int) -> str | None:
    return {1: "Alice", 2: "Bob"}.get(user_id)


def parse_and_double(s: str) -> int:
    return int(s) * 2


def read_file_content(path: str | Path) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def read_and_parse(path: str | Path) -> int:
    try:
        return int(read_file_content(path).strip())
    except ValueError as e:
        raise ValueError(f"{path} does not contain an integer") from e


def withdraw(balance: int, amount: int) -> int:
    if amount > balance:
        raise InsufficientFundsError(balance, amount)
    return balance - amount


def run() -> None:
    print("=== Optional results ===")
    demo_optional()

    print("\n=== try / except ===")
    demo_exceptions()

    print("\n=== Propagation & chaining ===")
    demo_propagation()

    print("\n=== Custom exceptions ===")
    demo_custom_error()


def demo_optional() -> None:
    for a, b in ((10, 2), (10, 0)):
        result = divide(a, b)
        print(f"{a} / {b} = {result if result is not None else 'cannot divide by zero'}")
    for user_id in (1, 3):
        print(f"user {user_id}: {find_user(user_id) or 'not found'}")


def demo_exceptions() -> None:
    for text in ("42", "not a number"):
        try:
            doubled = parse_and_double(text)
        except ValueError as e:
            print(f"parse error: {e}")
        else:
            print(f"double of {text} is {doubled}")
        finally:
            print(f"  (finished with {text!r})")

    try:
        content = read_file_content(SAMPLE_FILE)
    except OSError as e:
        print(f"failed to read file: {type(e).__name__}: {e.strerror}")
    else:
        print(f"file content (first 50 chars): {content[:50]}")


def demo_propagation() -> None:
    try:
        value = read_and_parse(SAMPLE_FILE)
    except FileNotFoundError:
        print(f"{SAMPLE_FILE} is missing, the error propagated from read_file_content")
    except ValueError as e:
        print(f"{e} (caused by {e.__cause__!r})")
    else:
        print(f"parsed value: {value}")


def demo_custom_error() -> None:
    balance = 100
    for amount in (30, 500):
        try:
            balance = withdraw(balance, amount)
            print(f"withdrew {amount}, balance now {balance}")
        except InsufficientFundsError as e:
            print(f"{type(e).__name__}: {e} (short by {e.requested - e.balance})")
