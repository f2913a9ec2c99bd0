"""
Type definitions and data structures for the ebook sorter.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple


EPUB_EXTENSION = ".epub"
UNSORTED_DIR = "Unsorted"


def printable(text: str) -> str:
    """Replace undecodable file name bytes so the text can be displayed."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class PlaceStrategy(Enum):
    """How a book is placed into its author directory."""
    COPY = "copy"
    MOVE = "move"


class ErrorKind(Enum):
    """Kinds of errors recorded during a run."""
    INVALID_EBOOK = "invalid_ebook"
    IO = "io"


@dataclass(frozen=True)
class EbookMetadata:
    """Read-only metadata of a book: key -> ordered values.

    A key can be absent or present with zero, one or many values. Both
    cases are kept apart: ``values()`` returns ``None`` for an absent key
    and an empty tuple for a key without values.
    """
    entries: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        frozen = MappingProxyType({key: tuple(values) for key, values in self.entries.items()})
        object.__setattr__(self, "entries", frozen)

    @classmethod
    def from_lists(cls, entries: Mapping[str, Iterable[str]]) -> "EbookMetadata":
        return cls(entries={key: tuple(values) for key, values in entries.items()})

    def values(self, key: str) -> Optional[Tuple[str, ...]]:
        return self.entries.get(key)

    def first(self, key: str) -> Optional[str]:
        values = self.entries.get(key)
        if not values:
            return None
        return values[0]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class PlacementDecision:
    """Where a book goes, relative to the output directory."""
    author_dir: str
    filename: str


@dataclass(frozen=True)
class RunError:
    """A failure recorded for one candidate file."""
    kind: ErrorKind
    description: str
    path: Optional[str] = None

    @classmethod
    def invalid_ebook(cls, path: str, description: str) -> "RunError":
        return cls(kind=ErrorKind.INVALID_EBOOK, description=description, path=path)

    @classmethod
    def io(cls, description: str) -> "RunError":
        return cls(kind=ErrorKind.IO, description=description)

    def row(self) -> Tuple[str, str]:
        """Return the (error, path) pair shown in the summary table."""
        if self.kind is ErrorKind.INVALID_EBOOK:
            return printable(self.description), printable(self.path or "")
        return printable(self.description), ""


@dataclass(frozen=True)
class Config:
    """Application configuration."""
    root: str
    output: str
    strategy: PlaceStrategy = PlaceStrategy.MOVE
    verbose: bool = False
    log_file: Optional[str] = None
