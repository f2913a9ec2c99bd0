#!/usr/bin/env python3
"""
Ebook Sorter

A tool for organizing EPUB files into author directories using the
metadata embedded in each book.
"""

import sys
from ebook_sorter.cli import main

if __name__ == "__main__":
    sys.exit(main())
