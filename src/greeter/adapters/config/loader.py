"""Layered configuration loading with profile validation and caching."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from greeter import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Config loader callable that also exposes ``cache_clear``.

    :data:`get_config` satisfies it in production; tests substitute any
    callable with the same keyword-only signature.
    """

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        """Return the merged configuration for *profile*, seeding ``.env`` lookup at *start_dir*."""
        ...

    def cache_clear(self) -> None:
        """Forget previously loaded configurations."""
        ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are unsafe to use as a path component.

    Delegates to ``lib_layered_config.validate_profile_name`` which checks
    length, allowed characters, Windows reserved names and traversal.

    Args:
        profile: Name given to ``--profile``.
        max_length: Upper bound on the name; ``DEFAULT_MAX_PROFILE_LENGTH``
            when None.

    Raises:
        ValueError: When *profile* is not acceptable.

    Examples:
        >>> validate_profile("staging")

        >>> validate_profile("../../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../../etc
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One short-lived CLI process reads configuration once per (profile, start_dir).
@lru_cache(maxsize=4)
def _read_layers(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Read and merge every layer; *profile* must already be validated.

    Args:
        profile: Validated profile name or None.
        start_dir: Directory seeding ``.env`` discovery.

    Returns:
        Config built by ``lib_layered_config.read_config`` with the greeter
        vendor, app and slug identifiers.
    """
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the merged greeter configuration.

    Layers are merged in precedence order
    defaults -> app -> host -> user -> dotenv -> env, where the defaults come
    from the bundled ``defaultconfig.toml``. A *profile* inserts
    ``profile/<name>/`` into every file-based layer path.

    Args:
        profile: Optional profile name (e.g. ``"test"``); validated first.
        start_dir: Directory seeding ``.env`` discovery; the working
            directory when None.

    Returns:
        Immutable Config with provenance for each key.

    Raises:
        ValueError: When *profile* is invalid.

    Note:
        Results are cached per ``(profile, start_dir)``; call
        ``get_config.cache_clear()`` to force a fresh read.

    Example:
        >>> config = get_config()
        >>> config.get("greeter", default={}).get("default_name")
        'World'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Drop cached Config objects so the next load re-reads every layer.

    Tests call it after writing configuration files or changing the
    environment.

    Example:
        >>> get_config.cache_clear()
    """
    _read_layers.cache_clear()


_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
