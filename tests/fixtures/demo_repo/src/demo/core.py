"""Core helpers for the demo fixture project."""

import os
from typing import Optional

DEFAULT_GREETING: str = "hello"
_CACHE: Optional[dict] = None


def greet(name):
    """Greets."""
    return f"{DEFAULT_GREETING}, {name}"


def shout(name: str, *, punctuation: str = "!") -> str:
    """Greet loudly."""
    return greet(name).upper() + punctuation


def home() -> str:
    return os.path.expanduser("~")


class Greeter:
    """Keeps a greeting for later."""

    def __init__(self, greeting: str = DEFAULT_GREETING) -> None:
        self.greeting = greeting
