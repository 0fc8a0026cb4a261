"""Package metadata, PEP 561 marker, and pyproject.toml drift tests.

LAYEREDCONF_* values decide where configuration files are looked up, so
they must not drift from the project metadata.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

from greeter import __init__conf__

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    return rtoml.load(PYPROJECT_PATH)


def _wheel_table() -> dict[str, Any]:
    tool_table = cast(dict[str, Any], _load_pyproject().get("tool", {}))
    hatch_table = cast(dict[str, Any], tool_table.get("hatch", {}))
    build_table = cast(dict[str, Any], hatch_table.get("build", {}))
    targets_table = cast(dict[str, Any], build_table.get("targets", {}))
    return cast(dict[str, Any], targets_table.get("wheel", {}))


@pytest.mark.os_agnostic
def test_print_info_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    from greeter import print_info

    print_info()

    captured = capsys.readouterr().out
    assert captured.startswith("Info for greeter:")
    assert "version" in captured
    assert __init__conf__.version in captured


@pytest.mark.os_agnostic
def test_metadata_constants_are_set() -> None:
    assert __init__conf__.name == "greeter"
    assert __init__conf__.version
    assert __init__conf__.shell_command == "greeter"


@pytest.mark.os_agnostic
def test_version_matches_pyproject_toml() -> None:
    assert __init__conf__.version == _load_pyproject()["project"]["version"]


@pytest.mark.os_agnostic
def test_name_matches_pyproject_toml() -> None:
    assert __init__conf__.name == _load_pyproject()["project"]["name"]


@pytest.mark.os_agnostic
def test_shell_command_is_a_declared_script() -> None:
    scripts = cast(dict[str, str], _load_pyproject()["project"]["scripts"])

    assert scripts[__init__conf__.shell_command] == "greeter.entry:main"


@pytest.mark.os_agnostic
def test_layeredconf_slug_matches_project_name() -> None:
    """The slug names Linux config paths (~/.config/<slug>/)."""
    project_name = _load_pyproject()["project"]["name"]

    assert project_name.replace("_", "-") == __init__conf__.LAYEREDCONF_SLUG


@pytest.mark.os_agnostic
@pytest.mark.parametrize("value", [__init__conf__.LAYEREDCONF_VENDOR, __init__conf__.LAYEREDCONF_APP])
def test_layeredconf_identifiers_are_not_blank(value: str) -> None:
    assert value.strip()


@pytest.mark.os_agnostic
def test_py_typed_marker_exists() -> None:
    packages = cast(list[str], _wheel_table().get("packages", []))
    package_dir = PROJECT_ROOT / packages[0]

    assert (package_dir / "py.typed").is_file()


@pytest.mark.os_agnostic
@pytest.mark.parametrize("needle", ["py.typed", "defaultconfig.toml"])
def test_package_data_is_included_in_wheel_config(needle: str) -> None:
    includes = cast(list[str], _wheel_table().get("include", []))

    assert any(needle in entry for entry in includes)
