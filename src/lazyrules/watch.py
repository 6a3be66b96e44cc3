"""Polling directory watcher.

The watcher is level-triggered: on every poll it fingerprints the watched
trees and, if the fingerprint changed since the previous poll, runs the
action once. The action always rebuilds from scratch.
"""

from __future__ import annotations

import hashlib
import logging
import os
import threading
from typing import Callable, Sequence


class Watcher:
    """Run *action* whenever a file under *roots* is added, removed, or touched."""

    def __init__(
        self,
        roots: Sequence[str],
        action: Callable[[], object],
        *,
        interval: float = 0.2,
        ignore: Sequence[str] = (),
        logger: logging.Logger | None = None,
    ) -> None:
        self.roots = list(roots)
        self.action = action
        self.interval = interval
        self.ignore = {os.path.abspath(p) for p in ignore}
        self._log = logger or logging.getLogger("lazyrules")
        self._last: str | None = None

    def fingerprint(self) -> str:
        """Hash of every non-hidden, non-ignored file path and its mtime."""
        digest = hashlib.sha1()
        for root in self.roots:
            for dirpath, dirnames, filenames in os.walk(root):
                dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
                for name in sorted(f for f in filenames if not f.startswith(".")):
                    full = os.path.join(dirpath, name)
                    if os.path.abspath(full) in self.ignore:
                        continue
                    try:
                        mtime = os.path.getmtime(full)
                    except FileNotFoundError:
                        continue  # removed mid-walk
                    digest.update(f"{full}\0{mtime}\0".encode("utf-8"))
        return digest.hexdigest()

    def poll(self) -> bool:
        """Check once; run the action if anything changed. The first poll always runs."""
        current = self.fingerprint()
        if current == self._last:
            return False
        self._last = current
        self.action()
        return True

    def run(self, stop: threading.Event | None = None) -> None:
        """Poll until *stop* is set."""
        stop = stop or threading.Event()
        self._log.info("Watching %s", ", ".join(self.roots))
        while not stop.is_set():
            try:
                self.poll()
            except OSError:
                self._log.exception("Rebuild failed")
            stop.wait(self.interval)
