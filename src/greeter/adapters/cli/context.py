"""Click context state and traceback flag management.

The root command stores a :class:`CLIContext` on ``ctx.obj``; subcommands
read it back through :func:`get_cli_context`. The traceback helpers let
``main`` switch lib_cli_exit_tools into verbose mode for one run and put
the previous flags back afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeter.composition import AppServices

TracebackState = tuple[bool, bool]
"""(traceback_enabled, force_color) as stored in ``lib_cli_exit_tools.config``."""


@dataclass(slots=True)
class CLIContext:
    """State the root command hands to every subcommand.

    Attributes:
        traceback: ``--traceback`` was given on the root command.
        config: Merged layered configuration for this invocation.
        services: Greeter factory and configuration loader.
        profile: Profile named by ``--profile``, if any.
        set_overrides: Raw ``--set`` strings, reapplied when a subcommand
            reloads configuration for another profile.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` with a populated :class:`CLIContext`.

    Whatever ``ctx.obj`` held before (usually the services factory passed in
    by ``main``) is discarded.

    Args:
        ctx: Click context of the root command.
        traceback: Whether verbose tracebacks were requested.
        config: Configuration loaded for this invocation.
        services: Services built by the composition root.
        profile: Optional configuration profile name.
        set_overrides: ``--set`` strings as typed on the command line.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from greeter.composition import build_testing
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=False, config=MagicMock(), services=build_testing(), profile="dev")
        >>> ctx.obj.profile
        'dev'
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root command.

    Args:
        ctx: Click context of any subcommand; ``ctx.obj`` is shared with the root.

    Returns:
        The stored CLIContext.

    Raises:
        RuntimeError: When the root command has not run.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=True, config=MagicMock(), services=MagicMock())
        >>> get_cli_context(ctx).traceback
        True
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for lib_cli_exit_tools.

    Example:
        >>> apply_traceback_preferences(False)
        >>> lib_cli_exit_tools.config.traceback
        False
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Read the current traceback flags.

    Returns:
        ``(traceback, traceback_force_color)``; a flag missing from the
        lib_cli_exit_tools config reads as ``False``.
    """
    config = lib_cli_exit_tools.config
    return (
        bool(getattr(config, "traceback", False)),
        bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Write back flags captured by :func:`snapshot_traceback_state`.

    Args:
        state: Pair returned by an earlier snapshot.

    Example:
        >>> saved = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> restore_traceback_state(saved)
        >>> snapshot_traceback_state() == saved
        True
    """
    enabled, force_color = state
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
