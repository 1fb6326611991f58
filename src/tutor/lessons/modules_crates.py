"""
# Modules / Packages / Imports

Goal: organise code across files and find it again.

Key points:
- A module is a ``.py`` file; a package is a directory with ``__init__.py``
- ``import pkg.mod`` vs ``from pkg import name``; ``as`` renames
- Relative imports (``from . import x``) work inside packages
- A leading underscore marks a name as private by convention; ``__all__``
  controls ``from mod import *``
- ``importlib`` imports modules by name at runtime
- Distributions (what ``pip`` installs) are described by ``pyproject.toml``
"""

from __future__ import annotations

import importlib
import sys
import types
from importlib import metadata


def build_module(name: str) -> types.ModuleType:
    """Create an in-memory module with one public and one private function."""
    module = types.ModuleType(name, "An in-memory module for the lesson")
    source = (
        "__all__ = ['greet']\n"
        "def greet(who):\n"
        "    return f'hello from {__name__}, {who}'\n"
        "def _helper():\n"
        "    return 'private by convention'\n"
    )
    exec(compile(source, f"<{name}>", "exec"), module.__dict__)
    return module


def qualified_name(obj: object) -> str:
    return f"{obj.__module__}.{obj.__qualname__}"


def run() -> None:
    print("=== Module basics ===")
    math = importlib.import_module("math")
    print(f"importlib.import_module('math').sqrt(16) = {math.sqrt(16)}")
    print(f"'math' cached in sys.modules: {'math' in sys.modules}")

    print("\n=== Paths & names ===")
    from os import path as os_path

    print(f"os.path is {os_path.__name__}; join -> {os_path.join('src', 'tutor')}")
    print(f"this function lives at {qualified_name(run)}")
    print(f"this package: {__package__!r}")

    print("\n=== Visibility ===")
    garden = build_module("garden")
    print(garden.greet("learner"))
    print(f"__all__ = {garden.__all__}; _helper() still reachable: {garden._helper()!r}")

    print("\n=== Distributions ===")
    try:
        version = metadata.version("tutor")
    except metadata.PackageNotFoundError:
        version = "not installed"
    print(f"installed distribution 'tutor': {version}")
