"""Factories that build files from names according to their extension."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Mapping

from .errors import NoFileCreatedError
from .files import AbstractFile, TextFile

FileType = Callable[[str], AbstractFile]


class AbstractFileFactory(ABC):
    """Builds files from names."""

    @abstractmethod
    def create_file(self, filename: str) -> AbstractFile:
        """Return a new, empty file for the name."""


class SimpleFileFactory(AbstractFileFactory):
    """Chooses the file type from the text after the first dot."""

    def __init__(self, file_types: Mapping[str, FileType] | None = None) -> None:
        self._file_types: dict[str, FileType] = (
            dict(file_types) if file_types is not None else {"txt": TextFile}
        )

    def register(self, extension: str, file_type: FileType) -> None:
        """Build files ending in this extension with file_type."""
        self._file_types[extension] = file_type

    def create_file(self, filename: str) -> AbstractFile:
        _, dot, rest = filename.partition(".")
        extension = rest if dot else filename
        try:
            file_type = self._file_types[extension]
        except KeyError:
            raise NoFileCreatedError(f"unrecognised file type: {filename}") from None
        return file_type(filename)