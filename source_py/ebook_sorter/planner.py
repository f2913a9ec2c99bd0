"""
Destination naming for the ebook sorter.
"""

from .types import EPUB_EXTENSION, UNSORTED_DIR, EbookMetadata, PlacementDecision


def plan(metadata: EbookMetadata, original_filename: str,
         extension: str = EPUB_EXTENSION) -> PlacementDecision:
    """Derive the author directory and file name for a book."""
    return PlacementDecision(
        author_dir=author_dir_name(metadata),
        filename=destination_filename(metadata, original_filename, extension),
    )


def author_dir_name(metadata: EbookMetadata) -> str:
    creators = metadata.values("creator")
    if not creators:
        return UNSORTED_DIR
    # Used as-is in a path segment, no sanitization
    return ", ".join(creators)


def destination_filename(metadata: EbookMetadata, original_filename: str,
                         extension: str = EPUB_EXTENSION) -> str:
    title = metadata.first("title")
    if title is None:
        return original_filename.strip()
    return f"{title.strip()}{extension}"
