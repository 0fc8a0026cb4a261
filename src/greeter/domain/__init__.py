"""Domain layer - greeting formatting with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting text construction
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import CANONICAL_GREETING, CANONICAL_NAME, build_greeting
from .enums import OutputFormat
from .errors import ConfigurationError

__all__ = [
    "CANONICAL_GREETING",
    "CANONICAL_NAME",
    "build_greeting",
    "OutputFormat",
    "ConfigurationError",
]
