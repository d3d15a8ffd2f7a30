"""Commands that act on a file system when invoked from a prompt."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from .errors import FileNotAddedError, InvalidCommandError, MockOSError
from .factory import AbstractFileFactory
from .filesystem import AbstractFileSystem
from .files import AbstractFile
from .proxy import PasswordProxy


def _ask_new_password() -> str:
    print("What is the password?")
    words = input().split()
    return words[0] if words else ""


def _show_usage(word: str, purpose: str, syntax: str) -> str:
    """Print a usage line for a command and return it."""
    text = f"{word} {purpose}, {word} can be invoked with the command : {syntax}"
    print(text)
    return text


class AbstractCommand(ABC):
    """A command run with the text that followed its name."""

    @abstractmethod
    def execute(self, command: str) -> None:
        """Run the command; raises a MockOSError on failure."""

    @abstractmethod
    def display_info(self) -> str:
        """Print usage information and return it."""


class RemoveCommand(AbstractCommand):
    """Deletes a file: ``rm <filename>``."""

    def __init__(self, file_system: AbstractFileSystem) -> None:
        self._file_system = file_system

    def display_info(self) -> str:
        return _show_usage("remove", "deletes a file from the filesystem", "rm <filename>")

    def execute(self, command: str) -> None:
        self._file_system.delete_file(command)


class TouchCommand(AbstractCommand):
    """Creates a file: ``touch <filename>`` or ``touch <filename> -p``."""

    def __init__(
        self,
        file_system: AbstractFileSystem,
        file_factory: AbstractFileFactory,
        password_prompt: Callable[[], str] | None = None,
    ) -> None:
        self._file_system = file_system
        self._file_factory = file_factory
        self._password_prompt = password_prompt or _ask_new_password

    def display_info(self) -> str:
        return _show_usage("touch", "creates a file", "touch <filename>")

    def _add(self, filename: str, file: AbstractFile) -> None:
        try:
            self._file_system.add_file(filename, file)
        except MockOSError as exc:
            raise FileNotAddedError(f"file was not added: {filename}") from exc

    def execute(self, command: str) -> None:
        if " " not in command:
            self._add(command, self._file_factory.create_file(command))
            return

        words = command.split()
        filename = words[0] if words else ""
        option = words[1] if len(words) > 1 else ""
        if option != "-p":
            raise InvalidCommandError(f"invalid use of touch: {command!r}")

        secret = self._password_prompt()
        file = self._file_factory.create_file(filename)
        self._add(filename, PasswordProxy(file, secret))