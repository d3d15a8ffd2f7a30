# mockos

`mockos` is a small in-memory file system. It stores named files, keeps track of
which ones are open, and provides commands that create and remove files.
Everything lives in memory, and file contents are `bytes`.

## Modules

- `mockos.files`
  - `AbstractFile` is the file interface. It has a `name` property and the
    methods `read()`, `write(data)`, `append(data)`, `size()`, `accept(visitor)`
    and `clone(copy_name)`.
  - `TextFile` is the one concrete file type. `clone(copy_name)` returns an
    independent copy named `copy_name + ".txt"`.
  - `AbstractFileVisitor` declares `visit_text_file(file)`. `accept` calls it on
    the visitor. The package defines no concrete visitor, so you write your own.
- `mockos.proxy`
  - `PasswordProxy(file, password, prompt=None)` wraps any file.
  - `read`, `write`, `append` and `accept` each call `prompt()` and compare the
    answer with the password:
    - a wrong password makes `read` return `b""`;
    - a wrong password makes `write` and `append` raise `IncorrectPasswordError`;
    - a wrong password makes `accept` do nothing.
  - `size`, `name` and `clone` need no password.
  - Without a `prompt`, the proxy asks for the password on standard input.
- `mockos.filesystem`
  - `AbstractFileSystem` is the interface.
  - `SimpleFileSystem` implements it with these methods:
    - `add_file(filename, file)`
    - `open_file(filename)`, which returns the file
    - `close_file(file)`
    - `delete_file(filename)`
    - `file_names()`, which returns the names sorted
- `mockos.factory`
  - `AbstractFileFactory` is the factory interface.
  - `SimpleFileFactory` chooses the file type from the text after the first dot
    in the name. By default it knows only `txt`.
  - `register(extension, file_type)` adds or replaces a type. A file type is any
    callable that takes a name and returns a file. You can also pass a mapping of
    types to the constructor.
- `mockos.parsing`
  - `RenameParsingStrategy().parse("a.txt b")` gives `["a.txt b", "a.txt"]`.
  - `TouchPlusCatParsingStrategy().parse("a.txt")` gives `["a.txt", "a.txt"]`.
  - Missing words become empty strings.
- `mockos.commands`
  - `AbstractCommand` declares `execute(command)` and `display_info()`.
    `display_info()` prints a usage line and returns it.
  - `TouchCommand(file_system, file_factory, password_prompt=None)` creates a
    file with `touch <filename>`.
    - With `touch <filename> -p` it asks for a password, by default on standard
      input, and stores the file wrapped in a `PasswordProxy`.
    - Any other text after the name raises `InvalidCommandError`.
  - `RemoveCommand(file_system)` deletes the named file.
- `mockos.errors`
  - `ReturnCode` is an `IntEnum` of outcomes.
  - `MockOSError` is the base exception. Every subclass carries its `code`.

## Errors

Failures raise exceptions instead of returning codes.

| Situation | Exception |
| --- | --- |
| Adding `None` | `NullFileError` |
| Adding a file object that is already stored | `FileAlreadyExistsError` |
| Adding under a name that is taken | `FilenameTakenError` |
| Opening or deleting a name that does not exist | `FileDoesNotExistError` |
| Opening a file that is already open | `FileOpenError` |
| Deleting a file that is open | `FileOpenError` |
| Closing a file that is not open | `FileNotOpenError` |
| Creating a file with an unknown extension | `NoFileCreatedError` |

`TouchCommand` reports any failure to add the file as `FileNotAddedError`. The
original error is chained as its cause.

## Example

```python
from mockos.commands import RemoveCommand, TouchCommand
from mockos.errors import FileDoesNotExistError
from mockos.factory import SimpleFileFactory
from mockos.files import TextFile
from mockos.filesystem import SimpleFileSystem
from mockos.proxy import PasswordProxy

fs = SimpleFileSystem()
factory = SimpleFileFactory()

TouchCommand(fs, factory).execute("notes.txt")
f = fs.open_file("notes.txt")
f.write(b"hello")
f.append(b" world")
print(f.read().decode())   # hello world
fs.close_file(f)

RemoveCommand(fs).execute("notes.txt")
print(fs.file_names())     # []

try:
    fs.open_file("missing.txt")
except FileDoesNotExistError as exc:
    print(exc.code.name)   # FILE_DOES_NOT_EXIST

password = "password"
guarded = PasswordProxy(TextFile("private.txt"), password, prompt=lambda: "password")
guarded.write(b"kept safe")
print(guarded.read())      # b'kept safe'
```

## What it does not do

- There is no interactive shell or command loop. You create the commands and
  call `execute` on them yourself.
- No command lists, displays, concatenates, copies or renames files. The
  parsing strategies split arguments, but no macro command in the package uses
  them.
- The only file type is `TextFile`. There are no image files. Other types have
  to be supplied through `SimpleFileFactory.register`.
- Nothing is written to disk.

## Running the tests

```
pip install -e ".[test]"
pytest
```