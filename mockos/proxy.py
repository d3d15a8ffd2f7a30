"""A file wrapper that asks for a password before giving access."""

from __future__ import annotations

from typing import Callable

from .errors import IncorrectPasswordError
from .files import AbstractFile, AbstractFileVisitor


def _ask_password() -> str:
    print("Please input a password to access the file:")
    words = input().split()
    return words[0] if words else ""


class PasswordProxy(AbstractFile):
    """Guards a file: reading, writing and visiting need the password."""

    def __init__(
        self,
        file: AbstractFile,
        password: str,
        prompt: Callable[[], str] | None = None,
    ) -> None:
        self._file = file
        self._password = password
        self._prompt = prompt or _ask_password

    def __repr__(self) -> str:
        return f"PasswordProxy({self._file!r})"

    def check_password(self, attempt: str) -> bool:
        """True when the attempt matches the stored password."""
        return attempt == self._password

    def _granted(self) -> bool:
        return self.check_password(self._prompt())

    def read(self) -> bytes:
        """The contents, or empty bytes when the password is wrong."""
        if self._granted():
            return self._file.read()
        return b""

    def write(self, data: bytes) -> None:
        if not self._granted():
            raise IncorrectPasswordError()
        self._file.write(data)

    def append(self, data: bytes) -> None:
        if not self._granted():
            raise IncorrectPasswordError()
        self._file.append(data)

    def size(self) -> int:
        return self._file.size()

    @property
    def name(self) -> str:
        return self._file.name

    def accept(self, visitor: AbstractFileVisitor) -> None:
        """Pass the visitor on only when the password is right."""
        if self._granted():
            self._file.accept(visitor)

    def clone(self, copy_name: str) -> PasswordProxy:
        return PasswordProxy(self._file.clone(copy_name), self._password, self._prompt)