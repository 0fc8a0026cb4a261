"""``greeter hello [NAME]`` - greet a name or the configured default."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greeter.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _resolve_name(cli_ctx: CLIContext, name: str | None) -> str:
    """Return *name*, or ``[greeter] default_name`` when it was omitted.

    Raises:
        SystemExit: With CONFIG_ERROR when ``[greeter]`` is invalid.
    """
    if name is not None:
        return name
    try:
        greeting_config = cli_ctx.services.load_greeting_config(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        logger.error("Invalid greeter configuration", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    return greeting_config.default_name


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.pass_context
def cli_hello(ctx: click.Context, name: str | None) -> None:
    r"""Write "Hello, NAME!" to standard output.

    NAME is used verbatim. Without it the configured default name is used
    (``[greeter] default_name``, "World" unless changed).

    \b
    Examples:
      greeter hello            # Hello, World!
      greeter hello Alice      # Hello, Alice!
      greeter --set greeter.default_name=Bob hello
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        addressee = _resolve_name(cli_ctx, name)
        logger.info("Executing hello command", extra={"addressee": addressee, "explicit": name is not None})
        cli_ctx.services.greet(addressee)


__all__ = ["cli_hello"]
