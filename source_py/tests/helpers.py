"""Builders for real EPUB files used by the tests."""

import os
from typing import Optional, Sequence

from ebooklib import epub


def write_epub(path: str, title: Optional[str] = None,
               creators: Sequence[str] = ()) -> str:
    """Write a minimal, valid EPUB to ``path`` and return the path."""
    book = epub.EpubBook()
    book.set_identifier("test-book-id")
    book.set_language("en")
    if title is not None:
        book.set_title(title)
    for creator in creators:
        book.add_author(creator)

    chapter = epub.EpubHtml(title="Intro", file_name="chap_01.xhtml", lang="en")
    chapter.content = "<h1>Intro</h1><p>Once upon a time.</p>"
    book.add_item(chapter)
    book.toc = (epub.Link("chap_01.xhtml", "Introduction", "intro"),)
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", chapter]

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    epub.write_epub(path, book, {})
    return path


def write_file(path: str, content: bytes = b"not an epub") -> str:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "wb") as f:
        f.write(content)
    return path
