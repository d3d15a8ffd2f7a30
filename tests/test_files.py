import pytest

from mockos.files import AbstractFile, AbstractFileVisitor, TextFile

NAME = "FileName.txt"


class RecordingVisitor(AbstractFileVisitor):
    def __init__(self):
        self.seen = []

    def visit_text_file(self, file):
        self.seen.append((file.name, file.read()))


@pytest.fixture
def empty():
    return TextFile(NAME)


@pytest.fixture
def hi(empty):
    empty.write(b"hi")
    return empty


def test_constructor(empty):
    assert (empty.name, empty.size(), empty.read()) == (NAME, 0, b"")


@pytest.mark.parametrize(
    "steps, expected",
    [
        ([("write", b"hi")], b"hi"),
        ([("write", b"hi"), ("append", b"hi")], b"hihi"),
        ([("write", b"hello"), ("write", b"hi")], b"hi"),
        ([("append", b"ab"), ("append", b"cd")], b"abcd"),
    ],
)
def test_contents_after_steps(empty, steps, expected):
    for method, data in steps:
        getattr(empty, method)(data)
    assert empty.read() == expected
    assert empty.size() == len(expected)


def test_read_returns_copy(hi):
    data = bytearray(hi.read())
    data.extend(b"!")
    assert hi.read() == b"hi"


def test_accept_visits_text_file(hi):
    visitor = RecordingVisitor()
    hi.accept(visitor)
    assert visitor.seen == [(NAME, b"hi")]


def test_clone_adds_extension_and_copies(hi):
    copy = hi.clone("Copy")
    assert (copy.name, copy.read()) == ("Copy.txt", b"hi")
    assert copy is not hi


def test_clone_is_independent(hi):
    copy = hi.clone("Copy")
    copy.append(b"!")
    assert (hi.read(), copy.read()) == (b"hi", b"hi!")


def test_abstract_file_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AbstractFile()