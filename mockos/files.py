"""File objects held by the mock file system, and their visitor interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AbstractFileVisitor(ABC):
    """Operation applied to a file through double dispatch."""

    @abstractmethod
    def visit_text_file(self, file: TextFile) -> None:
        """Handle a text file."""


class AbstractFile(ABC):
    """A named file whose contents are bytes."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The file's name."""

    @abstractmethod
    def read(self) -> bytes:
        """Return the file's contents."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Replace the file's contents."""

    @abstractmethod
    def append(self, data: bytes) -> None:
        """Add data to the end of the file."""

    @abstractmethod
    def size(self) -> int:
        """Number of bytes held."""

    @abstractmethod
    def accept(self, visitor: AbstractFileVisitor) -> None:
        """Let a visitor act on this file."""

    @abstractmethod
    def clone(self, copy_name: str) -> AbstractFile:
        """Return an independent copy under a new name."""


class TextFile(AbstractFile):
    """A plain text file; clones get the ``.txt`` extension added."""

    extension = ".txt"

    def __init__(self, name: str) -> None:
        self._name = name
        self._contents = bytearray()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"

    @property
    def name(self) -> str:
        return self._name

    def read(self) -> bytes:
        return bytes(self._contents)

    def write(self, data: bytes) -> None:
        self._contents = bytearray(data)

    def append(self, data: bytes) -> None:
        self._contents += data

    def size(self) -> int:
        return len(self._contents)

    def accept(self, visitor: AbstractFileVisitor) -> None:
        visitor.visit_text_file(self)

    def clone(self, copy_name: str) -> TextFile:
        copy = type(self)(copy_name + self.extension)
        copy.write(self._contents)
        return copy