"""Application layer - port definitions consumed by the adapters.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    Greet,
    InitLogging,
    LoadGreetingConfig,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "Greet",
    "InitLogging",
    "LoadGreetingConfig",
]
