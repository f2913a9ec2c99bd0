import os
import shutil
import tempfile
import unittest

from ebook_sorter.placer import Placer
from ebook_sorter.types import PlaceStrategy, PlacementDecision


class TestPlacer(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.TemporaryDirectory()
        self.root_path = self.test_dir.name
        self.output = os.path.join(self.root_path, "out")

    def tearDown(self):
        self.test_dir.cleanup()

    def create_file(self, filename, content=b"epub bytes"):
        path = os.path.join(self.root_path, filename)
        with open(path, "wb") as f:
            f.write(content)
        return path

    def read(self, path):
        with open(path, "rb") as f:
            return f.read()

    def test_move_relocates_file(self):
        source = self.create_file("book.epub")

        destination = Placer(self.output, PlaceStrategy.MOVE).place(
            source, PlacementDecision("Jane Doe", "My Story.epub"))

        self.assertEqual(destination, os.path.join(self.output, "Jane Doe", "My Story.epub"))
        self.assertTrue(os.path.isfile(destination))
        self.assertFalse(os.path.exists(source))

    def test_copy_keeps_source(self):
        source = self.create_file("book.epub", b"\x00\x01payload")

        destination = Placer(self.output, PlaceStrategy.COPY).place(
            source, PlacementDecision("Unsorted", "book.epub"))

        self.assertTrue(os.path.isfile(source))
        self.assertEqual(self.read(destination), b"\x00\x01payload")

    def test_creates_missing_ancestors(self):
        source = self.create_file("book.epub")
        output = os.path.join(self.root_path, "a", "b", "c")

        destination = Placer(output, PlaceStrategy.COPY).place(
            source, PlacementDecision("Author", "Title.epub"))

        self.assertTrue(os.path.isdir(os.path.join(output, "Author")))
        self.assertTrue(os.path.isfile(destination))

    def test_existing_destination_is_overwritten(self):
        source = self.create_file("book.epub", b"new")
        os.makedirs(os.path.join(self.output, "Author"))
        existing = os.path.join(self.output, "Author", "Title.epub")
        with open(existing, "wb") as f:
            f.write(b"old")

        Placer(self.output, PlaceStrategy.COPY).place(source, PlacementDecision("Author", "Title.epub"))

        self.assertEqual(self.read(existing), b"new")

    def test_move_overwrites_existing_destination(self):
        source = self.create_file("book.epub", b"new")
        os.makedirs(os.path.join(self.output, "Author"))
        existing = os.path.join(self.output, "Author", "Title.epub")
        with open(existing, "wb") as f:
            f.write(b"old")

        Placer(self.output, PlaceStrategy.MOVE).place(source, PlacementDecision("Author", "Title.epub"))

        self.assertEqual(self.read(existing), b"new")
        self.assertFalse(os.path.exists(source))

    def test_author_path_blocked_by_file_raises(self):
        source = self.create_file("book.epub")
        os.makedirs(self.output)
        with open(os.path.join(self.output, "Author"), "w") as f:
            f.write("not a directory")

        with self.assertRaises(OSError):
            Placer(self.output, PlaceStrategy.MOVE).place(source, PlacementDecision("Author", "Title.epub"))
        self.assertTrue(os.path.exists(source))

    def test_copy_onto_itself_raises(self):
        os.makedirs(os.path.join(self.root_path, "Author"))
        source = os.path.join(self.root_path, "Author", "Title.epub")
        with open(source, "wb") as f:
            f.write(b"content")

        with self.assertRaises(shutil.SameFileError):
            Placer(self.root_path, PlaceStrategy.COPY).place(source, PlacementDecision("Author", "Title.epub"))

    def test_missing_source_raises(self):
        missing = os.path.join(self.root_path, "missing.epub")

        with self.assertRaises(OSError):
            Placer(self.output, PlaceStrategy.MOVE).place(missing, PlacementDecision("Author", "Title.epub"))


if __name__ == '__main__':
    unittest.main()
