"""Blocking filesystem change notifications backed by watchdog."""
from __future__ import annotations

import fnmatch
import pathlib
import queue
import time
from typing import Iterator, List, Tuple

from watchdog.events import FileClosedEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .loggingx import logger

Stamped = Tuple[float, str]


class CloseWriteHandler(FileSystemEventHandler):
    """Forward every close-after-write of a file into *events*, with its arrival time."""

    def __init__(self, events: "queue.Queue[Stamped]") -> None:
        super().__init__()
        self._events = events

    def on_closed(self, event: FileClosedEvent) -> None:
        if event.is_directory:
            return
        self._events.put((time.monotonic(), str(event.src_path)))


class DirectoryWatcher:
    """Watch a directory and hand out one notification per write-close event.

    Usage::

        with DirectoryWatcher(path) as watcher:
            for changed in watcher.changes():
                rebuild()

    Writes that land while the consumer is busy with a change (compiler
    output, mostly) are ignored unless the file matches *pattern*.
    """

    def __init__(self, directory: pathlib.Path, recursive: bool = False, pattern: str = "*.java") -> None:
        self.directory = pathlib.Path(directory)
        self.recursive = recursive
        self.pattern = pattern
        self._events: "queue.Queue[Stamped]" = queue.Queue()
        self._handler = CloseWriteHandler(self._events)
        self._observer: Observer | None = None

    def start(self) -> None:
        if self._observer is not None:
            return
        observer = Observer()
        observer.schedule(self._handler, str(self.directory), recursive=self.recursive)
        observer.start()
        self._observer = observer
        logger.debug("Watching %s (recursive=%s)", self.directory, self.recursive)

    def stop(self) -> None:
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join()
        self._observer = None
        logger.debug("Stopped watching %s", self.directory)

    def __enter__(self) -> "DirectoryWatcher":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def changes(self) -> Iterator[str]:
        """Yield the path of each write-close event, blocking between events.

        Every event that arrives while waiting is yielded on its own. Between
        a yield and the next request the consumer is busy; events stamped in
        that window are dropped unless they name a source file.
        """

        busy: List[Tuple[float, float]] = []
        while True:
            stamp, path = self._events.get()
            busy = [window for window in busy if window[1] > stamp]
            if any(start <= stamp for start, _ in busy) and not self.is_source(path):
                logger.debug("Ignoring %s written during the last pass", path)
                continue
            started = time.monotonic()
            yield path
            busy.append((started, time.monotonic()))

    def is_source(self, path: str) -> bool:
        name = pathlib.PurePath(path).name
        return not name.startswith(".") and fnmatch.fnmatch(name, self.pattern)
