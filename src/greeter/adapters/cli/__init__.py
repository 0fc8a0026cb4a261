"""Command-line interface for greeter.

Public facade for the CLI subsystem so callers do not depend on the module
boundaries inside it.

Contents:
    * Root command group from :mod:`.root`
    * Entry point from :mod:`.main`
    * Subcommands from :mod:`.commands`
    * Context and traceback helpers from :mod:`.context`
"""

from __future__ import annotations

from .commands import (
    cli_config,
    cli_config_generate_examples,
    cli_fail,
    cli_hello,
    cli_info,
)
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
    "cli",
    "main",
    "cli_config",
    "cli_config_generate_examples",
    "cli_fail",
    "cli_hello",
    "cli_info",
]
