"""Runner: one build pass from glob patterns to a written stylesheet."""

from __future__ import annotations

import logging
import threading

from lazyrules.compiler import compile_assets
from lazyrules.config import LazyRulesConfig
from lazyrules.errors import EmptyInputError, LazyRulesError
from lazyrules.model.result import CompileResult
from lazyrules.sources import collect_assets, expand_patterns, watch_roots
from lazyrules.watch import Watcher
from lazyrules.writer import write_stylesheet


class LazyRulesRunner:
    """Wires the input collaborators, the compiler, and the writer."""

    def __init__(
        self, config: LazyRulesConfig, *, logger: logging.Logger | None = None
    ) -> None:
        self.config = config
        self.log = logger or logging.getLogger("lazyrules")

    def compile(self) -> CompileResult:
        """Expand, probe, and compile without writing anything."""
        paths = expand_patterns(self.config.images)
        if not paths:
            if self.config.fail_on_empty:
                raise EmptyInputError(
                    "No images matched: " + " ".join(self.config.images)
                )
            self.log.warning("No images matched: %s", " ".join(self.config.images))
        return compile_assets(collect_assets(paths), self.config.stylesheet)

    def build(self) -> CompileResult:
        """Compile and write the stylesheet, logging every failed asset."""
        result = self.compile()
        for failure in result.failures:
            self.log.error("Skipped %s", failure)
        write_stylesheet(self.config.stylesheet, result.css)
        self.log.info(
            "Stylesheet generated at - %s (%d rule(s), %d failure(s))",
            self.config.stylesheet,
            len(result.descriptors),
            len(result.failures),
        )
        return result

    def _rebuild(self) -> None:
        try:
            self.build()
        except LazyRulesError as exc:
            self.log.error("Build failed: %s", exc)

    def watch(self, stop: threading.Event | None = None) -> None:
        """Rebuild whenever the image directories change, until *stop* is set."""
        watcher = Watcher(
            watch_roots(self.config.images),
            self._rebuild,
            interval=self.config.interval,
            ignore=[self.config.stylesheet],
            logger=self.log,
        )
        watcher.run(stop)
