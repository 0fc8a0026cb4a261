"""In-memory greeting adapters for testing.

Contents:
    * :class:`GreetingSpy` - Records greetings instead of writing to stdout.
    * :func:`load_greeting_config_in_memory` - Loader using the real model.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ...domain.behaviors import build_greeting
from ..console.config import GreetingConfig, load_greeting_config


def _empty_str_list() -> list[str]:
    return []


@dataclass
class GreetingSpy:
    """Captures greet calls for test assertions.

    ``greet`` matches the Greet port, so the bound method can be wired into
    AppServices in place of the console Greeter.

    Attributes:
        names: Names passed to ``greet``, in call order.
        lines: Rendered greeting lines, one per call.
        raise_exception: When set, ``greet`` records the call then raises it.

    Example:
        >>> spy = GreetingSpy()
        >>> spy.greet("Alice")
        >>> spy.lines
        ['Hello, Alice!']
    """

    names: list[str] = field(default_factory=_empty_str_list)
    lines: list[str] = field(default_factory=_empty_str_list)
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for the next test."""
        self.names.clear()
        self.lines.clear()
        self.raise_exception = None

    def greet(self, name: str) -> None:
        """Record *name* and the line the console Greeter would have written."""
        self.names.append(name)
        self.lines.append(build_greeting(name))
        if self.raise_exception is not None:
            raise self.raise_exception


def load_greeting_config_in_memory(config_dict: Mapping[str, Any]) -> GreetingConfig:
    """Parse greeter config from a dict using the real Pydantic model."""
    return load_greeting_config(config_dict)


__all__ = [
    "GreetingSpy",
    "load_greeting_config_in_memory",
]
