"""Application ports: callable Protocols that adapter functions satisfy.

Each Protocol declares a ``__call__`` whose signature matches an adapter
function or bound method, so plain callables conform structurally (PEP 544)
and the composition root can swap production and in-memory implementations.

Infrastructure types are imported under ``TYPE_CHECKING`` only, keeping this
layer free of adapter imports at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.console.config import GreetingConfig


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Render the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadGreetingConfig(Protocol):
    """Parse the ``[greeter]`` section out of a configuration mapping."""

    def __call__(self, config_dict: Mapping[str, Any]) -> GreetingConfig: ...


class Greet(Protocol):
    """Emit one greeting line for ``name``."""

    def __call__(self, name: str) -> None: ...


class InitLogging(Protocol):
    """Initialize the lib_log_rich runtime from configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "Greet",
    "InitLogging",
    "LoadGreetingConfig",
]
