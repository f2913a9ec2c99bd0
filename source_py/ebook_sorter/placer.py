"""
File placement for the ebook sorter.
"""

import logging
import os
import shutil

from .types import PlaceStrategy, PlacementDecision


class Placer:
    """Copies or moves books into author directories under an output root."""

    def __init__(self, output_root: str, strategy: PlaceStrategy = PlaceStrategy.MOVE):
        self.output_root = output_root
        self.strategy = strategy

    def place(self, source_path: str, decision: PlacementDecision) -> str:
        """Place ``source_path`` according to ``decision``.

        Existing files at the destination are overwritten where the
        platform allows it. Raises OSError on any filesystem failure.
        Returns the destination path.
        """
        dest_dir = os.path.join(self.output_root, decision.author_dir)
        if not os.path.exists(dest_dir):
            os.makedirs(dest_dir)
            logging.info(f"Created directory: {dest_dir}")

        destination = os.path.join(dest_dir, decision.filename)

        if self.strategy is PlaceStrategy.COPY:
            shutil.copy(source_path, destination)
            logging.info(f"Copied: {source_path} -> {destination}")
        else:
            os.replace(source_path, destination)
            logging.info(f"Moved: {source_path} -> {destination}")

        return destination
