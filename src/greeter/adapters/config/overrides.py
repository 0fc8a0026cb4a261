"""``--set SECTION.KEY=VALUE`` parsing and merging into a Config."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Python values an override string can turn into."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` assignment."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Interpret *raw* as JSON, keeping it as a plain string when that fails.

    Examples:
        >>> coerce_value("false")
        False
        >>> coerce_value("7")
        7
        >>> coerce_value('{"a": 1}')
        {'a': 1}
        >>> coerce_value("Alice")
        'Alice'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    The key is split at the first ``=``; everything after it is the value,
    so values may themselves contain ``=``. The first dotted component is the
    section, the rest form the key path.

    Raises:
        ValueError: When ``=`` is missing, the key has no dot, or any dotted
            component is empty.

    Examples:
        >>> parse_override("greeter.default_name=Alice")
        ConfigOverride(section='greeter', key_path=('default_name',), value='Alice')
        >>> parse_override("lib_log_rich.payload_limits.message_max_chars=8192").key_path
        ('payload_limits', 'message_max_chars')
    """
    key, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, rest = key.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(rest.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def _merge_into(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Place *override* into *tree*, creating nested tables on the way.

    Raises:
        TypeError: When an intermediate key already holds a non-table value.

    Example:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _merge_into(tree, ConfigOverride("a", ("b", "c"), 1))
        >>> tree
        {'a': {'b': {'c': 1}}}
    """
    node: dict[str, object] = tree.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for part in parents:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: Iterable[str]) -> Config:
    """Return *config* with every ``--set`` assignment deep-merged in.

    Later assignments to the same key win. With no assignments the original
    Config object is returned unchanged.

    Raises:
        ValueError: When an assignment is malformed.

    Examples:
        >>> cfg = Config({"greeter": {"default_name": "World"}}, {})
        >>> apply_overrides(cfg, ["greeter.default_name=Bob"])["greeter"]["default_name"]
        'Bob'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _merge_into(tree, parse_override(raw))
    if not tree:
        return config
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
