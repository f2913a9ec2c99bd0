"""
File scanning functionality for the ebook sorter.
"""

import os
from typing import Iterator

from .types import EPUB_EXTENSION


class Scanner:
    """Finds EPUB files under a root directory."""

    def __init__(self, root_path: str, extension: str = EPUB_EXTENSION):
        self.root_path = root_path
        self.extension = extension

    def scan(self) -> Iterator[str]:
        """Lazily yield the path of every matching file under the root."""
        # The root itself counts when it is a matching file
        if os.path.isfile(self.root_path):
            if self._matches(os.path.basename(self.root_path)):
                yield self.root_path
            return

        # Unreadable directories are skipped: os.walk ignores errors by default
        for root, dirs, filenames in os.walk(self.root_path):
            dirs.sort()
            for filename in sorted(filenames):
                if self._matches(filename):
                    yield os.path.join(root, filename)

    def _matches(self, filename: str) -> bool:
        """Exact, case-sensitive extension match."""
        return os.path.splitext(filename)[1] == self.extension
