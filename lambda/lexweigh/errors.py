# lambda/lexweigh/errors.py
from __future__ import annotations


class LexweighError(Exception):
    """Base class for failures that abort a whole run."""


class ConfigError(LexweighError):
    """Missing or unreadable input."""


class RuleParseError(LexweighError):
    """A single rule clause could not be used. Callers log and skip it."""

    def __init__(self, clause: str, reason: str) -> None:
        super().__init__(f"{reason}: {clause!r}")
        self.clause = clause
        self.reason = reason


class EmptyTableError(LexweighError):
    def __init__(self) -> None:
        super().__init__("no valid rules found")


class SegmentationError(LexweighError):
    """No known token is a prefix of the remaining part of a word."""

    def __init__(self, word: str, remainder: str) -> None:
        super().__init__(f"no token recognized at position: {remainder!r} (word {word!r})")
        self.word = word
        self.remainder = remainder
        self.position = len(word) - len(remainder)


class DefinitionFormatError(LexweighError):
    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(
            f"line {line_number} of definitions doesn't seem to begin with a numeric weight"
        )
        self.line_number = line_number
        self.line = line


class CountMismatchWarning(UserWarning):
    """More definitions than words; the excess is dropped."""
