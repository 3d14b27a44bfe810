"""Invocation of the external compiler."""
from __future__ import annotations

import pathlib
import subprocess

import click

from .loggingx import logger

COMMAND_NOT_FOUND = 127


class CompileFailure(Exception):
    """The compiler exited with a non-zero status."""

    def __init__(self, path: pathlib.Path, returncode: int) -> None:
        super().__init__(f"Compilation of {path.name} failed with exit code {returncode}")
        self.path = path
        self.returncode = returncode

    @property
    def exit_status(self) -> int:
        """Status a shell would report: 128 + N when the compiler died from signal N."""

        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode


def compile_file(path: pathlib.Path, compiler: str = "javac", trace: bool = False) -> int:
    """Compile a single source file and return the compiler's exit status.

    The compiler runs in the file's directory with the bare file name as its
    only argument. Its output goes straight to the inherited stdout/stderr.
    """

    path = pathlib.Path(path)
    cmd = [compiler, path.name]
    if trace:
        click.echo(f"+ {' '.join(cmd)}", err=True)
    try:
        proc = subprocess.run(cmd, cwd=path.parent)
    except FileNotFoundError:
        logger.error("%s: command not found", compiler)
        return COMMAND_NOT_FOUND
    return proc.returncode
