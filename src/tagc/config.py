"""TOML config loading for tagc.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from tagc.c_emitter import DEFAULT_INDENT
from tagc.errors import ConfigError

CONFIG_NAME = "tagc.toml"


@dataclass
class PackageConfig:
    name: str = "untitled"
    version: str = "0.0.0"


@dataclass
class BuildConfig:
    program: str = "program.json"
    runtime: str = "runtime"
    out_dir: str = "build"
    indent: int = DEFAULT_INDENT


@dataclass
class TagcConfig:
    package: PackageConfig = field(default_factory=PackageConfig)
    build: BuildConfig = field(default_factory=BuildConfig)


def find_config(start_path: Path | None = None) -> Path:
    """Return the nearest tagc.toml at or above *start_path*.

    Raises FileNotFoundError when no directory up to the root has one.
    """
    path = (start_path or Path.cwd()).resolve()
    start = path.parent if path.is_file() else path
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_NAME
        if candidate.exists():
            return candidate
    raise FileNotFoundError(f"No {CONFIG_NAME} found in any parent directory")


_KIND_NAMES = {str: "a string", int: "an integer"}


def _value(table: dict, key: str, default, kind: type, section: str, path: Path):
    value = table.get(key, default)
    # TOML booleans would otherwise pass as integers
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ConfigError(
            f"[{section}] {key} must be {_KIND_NAMES[kind]}, got {value!r}",
            file=str(path),
        )
    return value


def load_config(path: Path) -> TagcConfig:
    """Parse a tagc.toml file into a TagcConfig.

    Raises ConfigError for malformed TOML, values of the wrong type, or a
    negative indent.
    """
    with open(path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"invalid TOML: {e}", file=str(path)) from e

    config = TagcConfig()

    if "package" in data:
        pkg = data["package"]
        config.package = PackageConfig(
            name=_value(pkg, "name", "untitled", str, "package", path),
            version=_value(pkg, "version", "0.0.0", str, "package", path),
        )

    if "build" in data:
        bld = data["build"]
        indent = _value(bld, "indent", DEFAULT_INDENT, int, "build", path)
        if indent < 0:
            raise ConfigError(
                f"[build] indent must not be negative, got {indent}", file=str(path),
            )
        config.build = BuildConfig(
            program=_value(bld, "program", "program.json", str, "build", path),
            runtime=_value(bld, "runtime", "runtime", str, "build", path),
            out_dir=_value(bld, "out_dir", "build", str, "build", path),
            indent=indent,
        )

    return config
