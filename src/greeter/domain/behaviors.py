"""Pure greeting formatting with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

CANONICAL_NAME: Final[str] = "World"
CANONICAL_GREETING: Final[str] = "Hello, World!"


def build_greeting(name: str = CANONICAL_NAME) -> str:
    """Format the greeting line for *name* without a line terminator.

    The name is used verbatim: empty strings, surrounding whitespace and
    non-ASCII text all pass through unchanged.

    Args:
        name: Addressee of the greeting.

    Returns:
        ``"Hello, " + name + "!"``.

    Example:
        >>> build_greeting()
        'Hello, World!'
        >>> build_greeting("Alice")
        'Hello, Alice!'
        >>> build_greeting("")
        'Hello, !'
    """
    return f"Hello, {name}!"


__all__ = [
    "CANONICAL_GREETING",
    "CANONICAL_NAME",
    "build_greeting",
]
