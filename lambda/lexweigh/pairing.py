# lambda/lexweigh/pairing.py
from __future__ import annotations

import warnings
from typing import List, Sequence

from .errors import CountMismatchWarning
from .model import LexiconPair, WeighedWord


def pair(words: Sequence[WeighedWord], definitions: Sequence[str]) -> List[LexiconPair]:
    """
    Match the n-th lightest word with the n-th definition.

    Extra words are dropped without comment; extra definitions are dropped
    after a CountMismatchWarning.
    """
    if len(definitions) > len(words):
        warnings.warn(
            f"too many definitions, not enough words ({len(definitions)} definitions, {len(words)} words)",
            CountMismatchWarning,
            stacklevel=2,
        )
    return [
        LexiconPair(word=w.word, definition=d, weight=w.weight)
        for w, d in zip(words, definitions)
    ]


def format_pair(p: LexiconPair) -> str:
    """`<word>\\t<definition>`, keeping the definition's own line ending."""
    definition = p.definition if p.definition.endswith("\n") else p.definition + "\n"
    return f"{p.word}\t{definition}"
