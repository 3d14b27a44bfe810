"""Configuration loader for :mod:`buildwatch`."""
from __future__ import annotations

from dataclasses import dataclass, field
import importlib
import importlib.util
import pathlib
from types import ModuleType

tomllib: ModuleType
if importlib.util.find_spec("tomllib") is not None:  # pragma: no cover - depends on runtime Python version
    tomllib = importlib.import_module("tomllib")
else:  # pragma: no cover - exercised on Python < 3.11
    tomllib = importlib.import_module("tomli")

CONFIG_NAME = ".buildwatch.toml"


@dataclass
class CompileConfig:
    """Which files are compiled and by what."""

    compiler: str = "javac"
    pattern: str = "*.java"


@dataclass
class WatchConfig:
    """Filesystem watch settings."""

    recursive: bool = False


@dataclass
class BuildConfig:
    """Complete configuration tree."""

    root: pathlib.Path
    build: CompileConfig = field(default_factory=CompileConfig)
    watch: WatchConfig = field(default_factory=WatchConfig)


def load_config(start: pathlib.Path | None = None) -> BuildConfig:
    """Load ``.buildwatch.toml`` from *start* or its parents.

    Without a configuration file the defaults reproduce the plain
    ``javac *.java`` behaviour. ``root`` is the directory holding the file,
    or ``start``/``cwd`` when absent.
    """

    if start is None:
        start = pathlib.Path.cwd()
    cfg_path = _find_config(start)
    root = cfg_path.parent if cfg_path else start
    config = BuildConfig(root=root)
    if not cfg_path:
        return config

    with cfg_path.open("rb") as fh:
        data = tomllib.load(fh)

    build_data = data.get("build", {})
    config.build = CompileConfig(
        compiler=str(build_data.get("compiler", config.build.compiler)),
        pattern=str(build_data.get("pattern", config.build.pattern)),
    )

    watch_data = data.get("watch", {})
    config.watch = WatchConfig(
        recursive=bool(watch_data.get("recursive", config.watch.recursive)),
    )

    return config


def _find_config(start: pathlib.Path) -> pathlib.Path | None:
    """Return the path to ``.buildwatch.toml`` searching upwards from ``start``."""

    for directory in [start, *start.parents]:
        candidate = directory / CONFIG_NAME
        if candidate.is_file():
            return candidate
    return None
