"""Static package metadata surfaced to the CLI and configuration layers.

The values mirror ``pyproject.toml`` and are kept in sync when the version
is bumped. ``LAYEREDCONF_*`` identifiers decide where ``lib_layered_config``
looks for configuration files on each platform.

Contents:
    * Metadata constants (``name``, ``title``, ``version``, ...).
    * :func:`print_info` - human-readable metadata dump for ``greeter info``.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "greeter"
title: Final[str] = "Console greeter with layered configuration and rich logging"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/greeter-dev/greeter"
author: Final[str] = "greeter developers"
author_email: Final[str] = "dev@greeter.invalid"
shell_command: Final[str] = "greeter"

#: Vendor directory used on macOS and Windows configuration paths.
LAYEREDCONF_VENDOR: Final[str] = "greeter"
#: Application directory used on macOS and Windows configuration paths.
LAYEREDCONF_APP: Final[str] = "Greeter"
#: Slug used for XDG paths on Linux and as the environment variable prefix.
LAYEREDCONF_SLUG: Final[str] = "greeter"


def print_info() -> None:
    """Print the resolved metadata as an aligned key/value block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greeter:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
