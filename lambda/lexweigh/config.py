# lambda/lexweigh/config.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from .errors import ConfigError


@dataclass
class RunOptions:
    """
    Everything one run consumes.
    - rules: rule-file text, or None for length mode
    - words: candidate word forms, one per entry
    - definitions: raw definition lines (with their newlines)
    - presorted: definitions are already in rank order and carry no weight
    """
    words: List[str]
    definitions: List[str]
    rules: Optional[str] = None
    presorted: bool = False


def read_text(path: str | Path) -> str:
    p = Path(path)
    try:
        # newline="" keeps \r\n endings as written
        with p.open(encoding="utf-8", newline="") as fh:
            return fh.read()
    except OSError as exc:
        raise ConfigError(f"can't open {p} for reading") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"can't decode {p} as UTF-8") from exc


def read_lines(path: str | Path) -> List[str]:
    """Lines of a file, split on newlines only, with their terminators kept."""
    *lines, last = read_text(path).split("\n")
    return [line + "\n" for line in lines] + ([last] if last else [])


def clean_words(lines: Iterable[str]) -> List[str]:
    # one word per line; blank lines carry no word
    words = (line.rstrip("\r\n") for line in lines)
    return [w for w in words if w.strip()]


def read_words(source: str | Path | TextIO) -> List[str]:
    if isinstance(source, (str, Path)):
        return clean_words(read_lines(source))
    try:
        return clean_words(source)
    except UnicodeDecodeError as exc:
        raise ConfigError(f"can't decode {getattr(source, 'name', 'input')} as UTF-8") from exc
