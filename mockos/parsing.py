"""Strategies that split one macro argument string into per-command arguments."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _words(inputs: str, count: int) -> list[str]:
    """The first ``count`` whitespace-separated words, padded with empty strings."""
    words = inputs.split()[:count]
    return words + [""] * (count - len(words))


class AbstractParsingStrategy(ABC):
    """Turns a macro's input into one argument string per sub-command."""

    @abstractmethod
    def parse(self, inputs: str) -> list[str]:
        """Return the arguments for each sub-command, in order."""


class RenameParsingStrategy(AbstractParsingStrategy):
    """Arguments for a copy followed by a remove: ``<existing> <new name>``."""

    def parse(self, inputs: str) -> list[str]:
        existing, new_name = _words(inputs, 2)
        return [f"{existing} {new_name}", existing]


class TouchPlusCatParsingStrategy(AbstractParsingStrategy):
    """Arguments for creating a file and then writing to it: ``<filename>``."""

    def parse(self, inputs: str) -> list[str]:
        (filename,) = _words(inputs, 1)
        return [filename, filename]