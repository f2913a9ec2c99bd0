class EbookSorterError(Exception):
    """Base error for the project."""


class InvalidEbookError(EbookSorterError):
    """A file could not be parsed as an EPUB document."""

    def __init__(self, path: str, description: str):
        super().__init__(f"{path}: {description}")
        self.path = path
        self.description = description
