"""Type-safe domain enums."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Rendering choices for ``greeter config``.

    Subclasses ``str`` so members compare equal to the raw Click choice.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
        >>> OutputFormat.HUMAN == "human"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = ["OutputFormat"]
