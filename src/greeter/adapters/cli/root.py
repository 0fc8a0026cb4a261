"""Root command group: global options and the default greeting.

Running ``greeter`` without a subcommand greets ``World`` and exits 0.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from greeter import __init__conf__
from greeter.adapters.config.overrides import apply_overrides
from greeter.domain.behaviors import CANONICAL_NAME

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from greeter.composition import AppServices

logger = logging.getLogger(__name__)


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Merge ``--set`` values into *config*.

    Raises:
        click.UsageError: When an override string is malformed.
    """
    try:
        return apply_overrides(config, set_overrides)
    except (ValueError, TypeError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration, start logging, and greet World when no subcommand is given.

    Example:
        >>> from click.testing import CliRunner
        >>> from greeter.composition import build_production
        >>> result = CliRunner().invoke(cli, [], obj=build_production)
        >>> result.stdout
        'Hello, World!\\n'
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click types obj as Any
    try:
        config = _apply_cli_overrides(services.get_config(profile=profile), set_overrides)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--profile'") from exc
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        with lib_log_rich.runtime.bind(job_id="cli-default", extra={"command": "<default>"}):
            logger.info("Greeting canonical name", extra={"addressee": CANONICAL_NAME})
            services.greet(CANONICAL_NAME)


# Commands import from package ancestors, so registration is deferred until ``cli`` exists.
def _register_commands() -> None:
    from .commands import (
        cli_config,
        cli_config_generate_examples,
        cli_fail,
        cli_hello,
        cli_info,
    )

    for cmd in (cli_hello, cli_info, cli_fail, cli_config, cli_config_generate_examples):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
