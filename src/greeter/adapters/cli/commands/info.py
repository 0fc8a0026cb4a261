"""Metadata and failure-path commands.

Contents:
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_fail` - Raise on purpose to exercise error handling.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greeter import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata (name, version, homepage, shell command)."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Raise RuntimeError so the error path and --traceback can be checked."""
    with lib_log_rich.runtime.bind(job_id="cli-fail", extra={"command": "fail"}):
        logger.warning("Executing intentional failure command")
        raise RuntimeError("I should fail")


__all__ = ["cli_fail", "cli_info"]
