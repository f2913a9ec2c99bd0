"""
EPUB metadata extraction for the ebook sorter.
"""

import logging
from typing import Dict, List

from ebooklib import epub

from .errors import InvalidEbookError
from .types import EbookMetadata


class MetadataExtractor:
    """Reads the Dublin Core metadata of EPUB files."""

    READ_OPTIONS = {"ignore_ncx": True}

    def extract(self, path: str) -> EbookMetadata:
        """Return the metadata of the book at ``path``.

        Raises InvalidEbookError when the file cannot be parsed as an EPUB.
        """
        try:
            book = epub.read_epub(path, options=self.READ_OPTIONS)
        except Exception as e:
            # ebooklib surfaces zip, XML and lookup failures as unrelated types
            logging.info(f"Failed to parse {path}: {e}")
            raise InvalidEbookError(path, self._describe(e)) from e

        return self._to_metadata(book)

    def _to_metadata(self, book: epub.EpubBook) -> EbookMetadata:
        dublin_core = book.metadata.get(epub.NAMESPACES["DC"], {})
        entries: Dict[str, List[str]] = {}
        for name, items in dublin_core.items():
            entries[name] = [value if value is not None else "" for value, _attrs in items]
        return EbookMetadata.from_lists(entries)

    @staticmethod
    def _describe(error: Exception) -> str:
        message = str(error).strip()
        if not message:
            return f"Failed to parse file as an EPUB document ({type(error).__name__})"
        return f"Failed to parse file as an EPUB document: {message}"
