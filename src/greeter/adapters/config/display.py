"""Render configuration through lib_layered_config's Rich display."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LayeredOutputFormat
from lib_layered_config import display_config as render_config
from rich.console import Console

from greeter.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Write *config* to stdout as TOML-like text or JSON.

    Pending log records are flushed first so they do not interleave with
    the rendered configuration.

    Args:
        config: Merged configuration to render.
        output_format: ``HUMAN`` for annotated TOML, ``JSON`` for machine output.
        section: Render only this top-level section.
        console: Rich console to write to; the library default when None.
        profile: Profile name shown in provenance comments.

    Raises:
        ValueError: When *section* does not exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    render_config(
        config,
        output_format=LayeredOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
