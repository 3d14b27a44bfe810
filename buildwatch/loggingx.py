"""Logging for buildwatch.

Progress lines go through ``click.echo``; this logger carries diagnostics about
the tool itself. ``BUILDWATCH_LOG=DEBUG`` shows watcher activity, ignored
events and compile failures that did not stop a non-strict run.
"""
from __future__ import annotations

import logging
import os

logger = logging.getLogger("buildwatch")

_handler = logging.StreamHandler()
_formatter = logging.Formatter("%(levelname)s %(message)s")
_handler.setFormatter(_formatter)
logger.addHandler(_handler)
logger.setLevel(os.environ.get("BUILDWATCH_LOG", "INFO"))
