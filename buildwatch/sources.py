"""Source file discovery."""
from __future__ import annotations

import pathlib
from typing import Tuple

SourceFileSet = Tuple[pathlib.Path, ...]


def discover_sources(directory: pathlib.Path, pattern: str = "*.java") -> SourceFileSet:
    """Return the files in *directory* matching *pattern*, in listing order.

    Only the top level of *directory* is searched and, as with a shell glob,
    hidden files are skipped. The result is recomputed on every call.
    """

    directory = pathlib.Path(directory)
    matches = [path for path in directory.glob(pattern) if path.is_file() and not path.name.startswith(".")]
    return tuple(sorted(matches, key=lambda path: path.name))
