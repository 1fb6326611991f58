"""
# list / str / dict

Goal: use the workhorse collections.

Key points:
- ``list``: ordered, growable; ``append``, ``extend``, ``pop``, ``sort``
- ``str``: immutable text; build with ``join`` or f-strings, not repeated ``+``
- ``dict``: insertion-ordered mapping; ``get``, ``setdefault``, ``items``
- ``collections.Counter`` and ``defaultdict`` cover common dict patterns
"""

from collections import Counter, defaultdict


def word_counts(text: str) -> dict[str, int]:
    counts: dict[str, int] = {}
    for word in text.split():
        counts[word] = counts.get(word, 0) + 1
    return counts


def group_by_length(words: list[str]) -> dict[int, list[str]]:
    groups: defaultdict[int, list[str]] = defaultdict(list)
    for word in words:
        groups[len(word)].append(word)
    return dict(groups)


def run() -> None:
    print("=== list ===")
    demo_list()

    print("\n=== str ===")
    demo_string()

    print("\n=== dict ===")
    demo_dict()

    print("\n=== Collection helpers ===")
    demo_collection_ops()


def demo_list() -> None:
    v = [1, 2, 3]
    v.append(4)
    v.extend([5, 6])
    print(f"v = {v}, third = {v[2]}, len = {len(v)}")
    print(f"v.pop() = {v.pop()}, now {v}")
    print(f"index 100 with a fallback: {v[100] if len(v) > 100 else None}")
    for i in range(len(v)):
        v[i] += 50
    print(f"after += 50: {v}")


def demo_string() -> None:
    s = "foo"
    s += "bar"
    print(f"concatenated: {s}")
    parts = ["tic", "tac", "toe"]
    print(f"joined: {'-'.join(parts)}")
    hello = "Здравствуйте"
    print(f"{hello!r}: {len(hello)} characters, {len(hello.encode())} UTF-8 bytes")
    print(f"chars: {list('नमस्ते')}")


def demo_dict() -> None:
    scores = {"Blue": 10, "Yellow": 50}
    print(f"Blue score: {scores.get('Blue')}")
    print(f"Red score (default): {scores.get('Red', 0)}")
    scores.setdefault("Red", 25)
    scores["Blue"] = 25
    for key, value in scores.items():
        print(f"  {key}: {value}")
    print(f"word counts: {word_counts('hello world wonderful world')}")


def demo_collection_ops() -> None:
    words = ["apple", "fig", "kiwi", "plum", "banana"]
    print(f"group_by_length: {group_by_length(words)}")
    print(f"Counter of letters in 'mississippi': {Counter('mississippi').most_common(2)}")
    print(f"sorted by length then name: {sorted(words, key=lambda w: (len(w), w))}")
    print(f"set union / intersection: {sorted({1, 2, 3} | {3, 4})} / {sorted({1, 2, 3} & {2, 3, 4})}")
