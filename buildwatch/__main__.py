"""Command line interface for the build watcher."""
from __future__ import annotations

import os
import pathlib
import signal
import sys
from typing import Tuple

import click

from .compiler import CompileFailure
from .config import load_config
from .loggingx import logger
from .runner import BuildMode, BuildRunner, BuildSettings
from .watcher import DirectoryWatcher


@click.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
    help="Compile every source file in the current directory; 'watch' rebuilds on each change",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(args: Tuple[str, ...]) -> None:
    settings = BuildSettings.from_args(args)
    cwd = pathlib.Path.cwd()
    config = load_config(cwd)
    logger.debug("Mode %s strict=%s config root %s", settings.mode.value, settings.strict, config.root)
    runner = BuildRunner(
        settings,
        directory=cwd,
        compiler=config.build.compiler,
        pattern=config.build.pattern,
    )

    try:
        if settings.mode is BuildMode.WATCH:
            watcher = DirectoryWatcher(cwd, recursive=config.watch.recursive, pattern=config.build.pattern)
            with watcher:
                runner.run(watcher.changes())
        else:
            runner.run()
    except CompileFailure as exc:
        click.echo(str(exc), err=True)
        sys.exit(exc.exit_status)
    except KeyboardInterrupt:
        # Die from SIGINT itself rather than click's "Aborted!" with status 1.
        signal.signal(signal.SIGINT, signal.SIG_DFL)
        os.kill(os.getpid(), signal.SIGINT)


if __name__ == "__main__":  # pragma: no cover
    main()
