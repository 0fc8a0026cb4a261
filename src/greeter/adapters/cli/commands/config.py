"""Configuration inspection commands.

Contents:
    * :func:`cli_config` - Display the merged configuration.
    * :func:`cli_config_generate_examples` - Write example configuration files.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config, generate_examples

from greeter import __init__conf__
from greeter.adapters.config.overrides import apply_overrides
from greeter.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _resolve_config(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    """Pick the Config to show and the profile it belongs to.

    A subcommand ``--profile`` reloads configuration for that profile and
    reapplies the root ``--set`` overrides; otherwise the root Config is used.
    """
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    reloaded = cli_ctx.services.get_config(profile=profile)
    return apply_overrides(reloaded, cli_ctx.set_overrides), profile


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help="Show only one configuration section (e.g., 'greeter')",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Override profile from root command (e.g., 'production', 'test')",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Display the merged configuration from all sources.

    Precedence: defaults -> app -> host -> user -> dotenv -> env
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    try:
        effective_config, effective_profile = _resolve_config(cli_ctx, profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--profile'") from exc

    extra = {"command": "config", "format": fmt.value, "section": section, "profile": effective_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration", extra=extra)
        try:
            cli_ctx.services.display_config(
                effective_config, output_format=fmt, section=section, profile=effective_profile
            )
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


@click.command("config-generate-examples", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--destination", type=click.Path(file_okay=False), required=True, help="Directory to write example files")
@click.option("--force", is_flag=True, default=False, help="Overwrite existing files")
def cli_config_generate_examples(destination: str, force: bool) -> None:
    """Write commented example configuration files into DESTINATION.

    Existing files are kept unless --force is given.
    """
    extra = {"command": "config-generate-examples", "destination": destination, "force": force}
    with lib_log_rich.runtime.bind(job_id="cli-config-generate-examples", extra=extra):
        logger.info("Generating example configuration files", extra=extra)
        try:
            paths = generate_examples(
                destination=destination,
                slug=__init__conf__.LAYEREDCONF_SLUG,
                vendor=__init__conf__.LAYEREDCONF_VENDOR,
                app=__init__conf__.LAYEREDCONF_APP,
                force=force,
            )
        except Exception as exc:
            logger.error("Failed to generate examples", extra={"error": str(exc)})
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.GENERAL_ERROR) from exc

    if not paths:
        click.echo("No files generated (all already exist). Use --force to overwrite.")
        return
    click.echo(f"Generated {len(paths)} example file(s):")
    for path in paths:
        click.echo(f"  {path}")


__all__ = ["cli_config", "cli_config_generate_examples"]
