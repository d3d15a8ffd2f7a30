"""Result codes and the exceptions raised by file-system operations."""

from __future__ import annotations

from enum import IntEnum


class ReturnCode(IntEnum):
    """Every outcome an operation or command can report."""

    SUCCESS = 0
    NO_FILE_CREATED = 1
    FILE_NOT_ADDED = 2
    INVALID_COMMAND = 3
    FILE_ALREADY_EXISTS = 4
    FILENAME_TAKEN = 5
    FILE_NOT_OPEN = 6
    FILE_OPEN = 7
    FILE_DOES_NOT_EXIST = 8
    INCORRECT_PASSWORD = 9
    APPEND_FAILED = 10
    INVALID_IMAGE = 11
    CANNOT_APPEND_IMAGES = 12
    INVALID_DS_USE = 13
    INVALID_CAT_USE = 14
    INVALID_CP_USE = 15
    COMMAND_INSERT_FAIL = 16
    COMMAND_FAIL = 17
    NULL_PTR = 18
    OPEN_IMAGE = 19
    CLOSED_IMAGE = 20
    OPEN_TEXT = 21
    CLOSED_TEXT = 22
    QUIT = 23


class MockOSError(Exception):
    """Base class for failures; carries the matching return code."""

    code: ReturnCode = ReturnCode.COMMAND_FAIL
    default_message = "operation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NoFileCreatedError(MockOSError):
    code = ReturnCode.NO_FILE_CREATED
    default_message = "no file was created"


class FileNotAddedError(MockOSError):
    code = ReturnCode.FILE_NOT_ADDED
    default_message = "file was not added"


class InvalidCommandError(MockOSError):
    code = ReturnCode.INVALID_COMMAND
    default_message = "invalid command"


class FileAlreadyExistsError(MockOSError):
    code = ReturnCode.FILE_ALREADY_EXISTS
    default_message = "file already exists"


class FilenameTakenError(MockOSError):
    code = ReturnCode.FILENAME_TAKEN
    default_message = "file name is already taken"


class FileNotOpenError(MockOSError):
    code = ReturnCode.FILE_NOT_OPEN
    default_message = "file is not open"


class FileOpenError(MockOSError):
    code = ReturnCode.FILE_OPEN
    default_message = "file is open"


class FileDoesNotExistError(MockOSError):
    code = ReturnCode.FILE_DOES_NOT_EXIST
    default_message = "file does not exist"


class IncorrectPasswordError(MockOSError):
    code = ReturnCode.INCORRECT_PASSWORD
    default_message = "incorrect password"


class NullFileError(MockOSError):
    code = ReturnCode.NULL_PTR
    default_message = "no file given"