"""
Ebook Sorter

A tool for organizing EPUB files into author directories using the
metadata embedded in each book.
"""

__version__ = "1.0.0"
__author__ = "Ebook Sorter Team"
