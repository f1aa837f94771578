"""Command line entry point for the thermal simulation.

``cli.app`` is resolved lazily so tests can patch names on that module.
"""

from importlib import import_module
from types import ModuleType


def __getattr__(name: str) -> ModuleType:
    if name == "app":
        return import_module("cli.app")
    raise AttributeError(name)
