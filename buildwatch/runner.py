"""Build pass and watch loop."""
from __future__ import annotations

from dataclasses import dataclass
import enum
import pathlib
from typing import Iterable, List, Sequence, Tuple

import click

from .compiler import CompileFailure, compile_file
from .loggingx import logger
from .sources import discover_sources


class BuildMode(enum.Enum):
    ONESHOT = "oneshot"
    WATCH = "watch"


class RunnerState(enum.Enum):
    IDLE = "idle"
    BUILDING = "building"
    WATCHING = "watching"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class BuildSettings:
    """Mode and failure policy, fixed for the lifetime of the process."""

    mode: BuildMode = BuildMode.ONESHOT
    strict: bool = False

    @staticmethod
    def from_args(args: Sequence[str]) -> "BuildSettings":
        """Derive settings from raw invocation arguments.

        Only the presence of arguments and whether the first one is ``watch``
        matter. No arguments means a strict one-shot build.
        """

        if not args:
            return BuildSettings(mode=BuildMode.ONESHOT, strict=True)
        if args[0] == "watch":
            return BuildSettings(mode=BuildMode.WATCH, strict=False)
        return BuildSettings(mode=BuildMode.ONESHOT, strict=False)


class BuildRunner:
    """Compile every matching source file, optionally again on each change."""

    def __init__(
        self,
        settings: BuildSettings,
        directory: pathlib.Path | None = None,
        compiler: str = "javac",
        pattern: str = "*.java",
    ) -> None:
        self.settings = settings
        self.directory = pathlib.Path(directory) if directory is not None else pathlib.Path.cwd()
        self.compiler = compiler
        self.pattern = pattern
        self.state = RunnerState.IDLE
        self.passes = 0

    def run_build_pass(self) -> List[Tuple[pathlib.Path, int]]:
        """Compile each source file in listing order.

        In strict mode the first non-zero exit raises :class:`CompileFailure`
        and the rest of the pass is skipped.
        """

        self.state = RunnerState.BUILDING
        self.passes += 1
        click.echo("Rebuilding all files in directory")
        results: List[Tuple[pathlib.Path, int]] = []
        for path in discover_sources(self.directory, self.pattern):
            click.echo(f"    Compiling {path.name}")
            returncode = compile_file(path, compiler=self.compiler, trace=self.settings.strict)
            results.append((path, returncode))
            if returncode == 0:
                continue
            if self.settings.strict:
                self.state = RunnerState.TERMINATED
                raise CompileFailure(path, returncode)
            logger.debug("%s exited with code %s for %s", self.compiler, returncode, path.name)
        return results

    def run(self, changes: Iterable[object] = ()) -> None:
        """Run one pass, then in watch mode one more pass per item of *changes*.

        *changes* blocks between items for as long as nothing has changed.
        A :class:`CompileFailure` in strict mode ends the loop.
        """

        self.run_build_pass()
        if self.settings.mode is not BuildMode.WATCH:
            self.state = RunnerState.TERMINATED
            return

        click.echo("Watching...")
        self.state = RunnerState.WATCHING
        try:
            for changed in changes:
                logger.debug("Change detected: %s", changed)
                self.run_build_pass()
                self.state = RunnerState.WATCHING
        finally:
            self.state = RunnerState.TERMINATED
