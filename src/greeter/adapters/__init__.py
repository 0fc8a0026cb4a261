"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.console` - Greeter writing to standard output
    * :mod:`.config` - Configuration loading, display, and overrides
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.cli` - Click CLI framework integration
    * :mod:`.memory` - In-memory implementations for tests
"""

from __future__ import annotations

__all__: list[str] = []
