"""
Run coordination for the ebook sorter.

Each candidate passes through extraction, planning and placement. Any
failure is recorded as a RunError and the run moves on to the next file.
"""

import logging
import os
from typing import List, Optional

from .errors import InvalidEbookError
from .extractor import MetadataExtractor
from .placer import Placer
from .planner import plan
from .scanner import Scanner
from .types import Config, RunError, printable


class ProgressReporter:
    """Receives progress updates from a run. The base class ignores them."""

    def start(self, total: int) -> None:
        pass

    def set_message(self, message: str) -> None:
        pass

    def advance(self) -> None:
        pass


class Sorter:
    """Sorts every EPUB under ``config.root`` into ``config.output``."""

    def __init__(self, config: Config,
                 extractor: Optional[MetadataExtractor] = None,
                 placer: Optional[Placer] = None):
        self.config = config
        self.scanner = Scanner(config.root)
        self.extractor = extractor or MetadataExtractor()
        self.placer = placer or Placer(config.output, config.strategy)
        self.placed = 0

    def run(self, progress: Optional[ProgressReporter] = None) -> List[RunError]:
        """Process every candidate and return the errors in order."""
        progress = progress or ProgressReporter()
        errors: List[RunError] = []
        self.placed = 0

        # Collected once: files placed under the root are never revisited
        candidates = list(self.scanner.scan())
        logging.info(f"Found {len(candidates)} EPUB files under {self.config.root}")
        progress.start(len(candidates))

        for path in candidates:
            progress.set_message(printable(os.path.basename(path)))
            error = self._process(path)
            if error is None:
                self.placed += 1
            else:
                errors.append(error)
            progress.advance()

        logging.info(f"Placed {self.placed} files, {len(errors)} errors")
        return errors

    def _process(self, path: str) -> Optional[RunError]:
        try:
            metadata = self.extractor.extract(path)
        except InvalidEbookError as e:
            return RunError.invalid_ebook(e.path, e.description)

        decision = plan(metadata, os.path.basename(path))

        try:
            self.placer.place(path, decision)
        except OSError as e:
            logging.info(f"Failed to place {path}: {e}")
            return RunError.io(str(e))

        return None
