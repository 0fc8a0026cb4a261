"""Subcommands registered on the root group.

Contents:
    * Greeting command from :mod:`.hello_cmd`
    * Info and failure commands from :mod:`.info`
    * Config commands from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config, cli_config_generate_examples
from .hello_cmd import cli_hello
from .info import cli_fail, cli_info

__all__ = [
    "cli_config",
    "cli_config_generate_examples",
    "cli_fail",
    "cli_hello",
    "cli_info",
]
