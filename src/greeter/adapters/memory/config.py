"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production configuration adapters
without touching the filesystem.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from lib_layered_config import Config

from ...domain.behaviors import CANONICAL_NAME
from ...domain.enums import OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return a Config holding only the built-in greeter defaults."""
    return Config({"greeter": {"default_name": CANONICAL_NAME}}, {})


def get_default_config_path_in_memory() -> Path:
    """Return a synthetic path (not a real file)."""
    return Path(tempfile.gettempdir()) / "greeter" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
