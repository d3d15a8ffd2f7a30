"""An in-memory file system that tracks which files are open."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .errors import (
    FileAlreadyExistsError,
    FileDoesNotExistError,
    FilenameTakenError,
    FileNotOpenError,
    FileOpenError,
    NullFileError,
)
from .files import AbstractFile


class AbstractFileSystem(ABC):
    """Storage for named files."""

    @abstractmethod
    def add_file(self, filename: str, file: AbstractFile) -> None:
        """Store a file under a name."""

    @abstractmethod
    def delete_file(self, filename: str) -> None:
        """Remove a closed file."""

    @abstractmethod
    def open_file(self, filename: str) -> AbstractFile:
        """Mark a file open and return it."""

    @abstractmethod
    def close_file(self, file: AbstractFile) -> None:
        """Mark an open file closed."""

    @abstractmethod
    def file_names(self) -> list[str]:
        """Names of all stored files, sorted."""


class SimpleFileSystem(AbstractFileSystem):
    """Keeps files in a dictionary and open files in a list."""

    def __init__(self) -> None:
        self._files: dict[str, AbstractFile] = {}
        self._open: list[AbstractFile] = []

    def _is_open_by_name(self, filename: str) -> bool:
        return any(f.name == filename for f in self._open)

    def add_file(self, filename: str, file: AbstractFile | None) -> None:
        if file is None:
            raise NullFileError()
        for stored_name, stored in sorted(self._files.items(), key=lambda kv: kv[0]):
            if stored is file:
                raise FileAlreadyExistsError(f"file already exists: {filename}")
            if stored_name == file.name:
                raise FilenameTakenError(f"file name already taken: {stored_name}")
        if filename in self._files:
            raise FilenameTakenError(f"file name already taken: {filename}")
        self._files[filename] = file

    def open_file(self, filename: str) -> AbstractFile:
        try:
            file = self._files[filename]
        except KeyError:
            raise FileDoesNotExistError(f"file does not exist: {filename}") from None
        if self._is_open_by_name(filename):
            raise FileOpenError(f"file is already open: {filename}")
        self._open.append(file)
        return file

    def close_file(self, file: AbstractFile) -> None:
        for index, opened in enumerate(self._open):
            if opened is file:
                del self._open[index]
                return
        raise FileNotOpenError()

    def delete_file(self, filename: str) -> None:
        if filename not in self._files:
            raise FileDoesNotExistError(f"file does not exist: {filename}")
        if self._is_open_by_name(filename):
            raise FileOpenError(f"file is open: {filename}")
        del self._files[filename]

    def file_names(self) -> list[str]:
        return sorted(self._files)