"""CLI execution wrapper shared by the console script and ``python -m``.

Both transports call :func:`main`, so the greeting, exit codes and error
formatting are the same whichever way the program was started.

Contents:
    * :func:`main` - run the root group and return an exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from greeter import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from greeter.composition import AppServices


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Invoke the root group and translate its outcome into an exit code.

    ``lib_cli_exit_tools.run_cli`` cannot forward ``obj``, so its handling is
    reproduced here with the services factory passed as the Click object.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        services_factory: Handed to the root command as ``ctx.obj``.

    Returns:
        0 on success, Click's code for usage errors and ``--help``/``--version``,
        otherwise the code lib_cli_exit_tools maps the exception to.
    """
    from .root import cli

    try:
        cli.main(
            args=list(argv) if argv is not None else sys.argv[1:],
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        # SystemExit and KeyboardInterrupt included: every failure leaves through lib_cli_exit_tools.
        return _report_failure(exc)
    return 0


def _report_failure(exc: BaseException) -> int:
    """Print *exc* in the configured traceback mode and return its exit code.

    Args:
        exc: Exception escaping the root group.

    Returns:
        Exit code chosen by ``lib_cli_exit_tools.get_system_exit_code``.
    """
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the greeter CLI and return its exit code.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Put the traceback flags back afterwards.
        services_factory: Returns the AppServices to run with. Callers outside
            the adapters layer pass ``build_production``.

    Returns:
        Process exit code; 0 after a successful greeting.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from greeter.composition import build_production
        >>> main([], services_factory=build_production)  # doctest: +SKIP
        Hello, World!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Worker threads must not tear down the shared logging runtime.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
