import pytest

from mockos.errors import (
    FileAlreadyExistsError,
    FileDoesNotExistError,
    FilenameTakenError,
    FileNotOpenError,
    FileOpenError,
    NullFileError,
)
from mockos.files import TextFile
from mockos.filesystem import SimpleFileSystem

NAME = "FileName.txt"


@pytest.fixture
def sfs():
    return SimpleFileSystem()


@pytest.fixture
def added(sfs):
    file = TextFile(NAME)
    sfs.add_file(file.name, file)
    return file


@pytest.fixture
def opened(sfs, added):
    sfs.open_file(added.name)
    return added


def test_add_valid(sfs, added):
    other = TextFile("Other.txt")
    sfs.add_file(other.name, other)
    assert sfs.file_names() == [NAME, "Other.txt"]


def test_add_null_file(sfs):
    with pytest.raises(NullFileError):
        sfs.add_file(NAME, None)
    assert sfs.file_names() == []


@pytest.mark.parametrize(
    "make_second, error",
    [
        (lambda first: first, FileAlreadyExistsError),
        (lambda first: TextFile(NAME), FilenameTakenError),
    ],
)
def test_add_duplicate(sfs, added, make_second, error):
    with pytest.raises(error):
        sfs.add_file(NAME, make_second(added))
    assert sfs.file_names() == [NAME]


def test_delete_valid(sfs, added):
    sfs.delete_file(added.name)
    assert sfs.file_names() == []


@pytest.mark.parametrize("action", ["open_file", "delete_file"])
def test_missing_file(sfs, action):
    with pytest.raises(FileDoesNotExistError):
        getattr(sfs, action)(NAME)
    assert sfs.file_names() == []
    file = TextFile(NAME)
    sfs.add_file(NAME, file)
    assert sfs.open_file(NAME) is file


@pytest.mark.parametrize("action", ["open_file", "delete_file"])
def test_action_on_open_file(sfs, opened, action):
    with pytest.raises(FileOpenError):
        getattr(sfs, action)(opened.name)
    assert sfs.file_names() == [NAME]


def test_open_valid(sfs, added):
    assert sfs.open_file(added.name) is added


def test_close_valid(sfs, opened):
    sfs.close_file(opened)
    assert sfs.open_file(opened.name) is opened


def test_close_not_open(sfs, added):
    with pytest.raises(FileNotOpenError):
        sfs.close_file(added)


def test_close_not_added(sfs):
    with pytest.raises(FileNotOpenError):
        sfs.close_file(TextFile(NAME))


def test_close_twice(sfs, opened):
    sfs.close_file(opened)
    with pytest.raises(FileNotOpenError):
        sfs.close_file(opened)


def test_delete_after_close(sfs, opened):
    sfs.close_file(opened)
    sfs.delete_file(opened.name)
    with pytest.raises(FileDoesNotExistError):
        sfs.open_file(opened.name)


def test_file_names_sorted(sfs):
    for name in ["c.txt", "a.txt", "b.txt"]:
        sfs.add_file(name, TextFile(name))
    assert sfs.file_names() == ["a.txt", "b.txt", "c.txt"]