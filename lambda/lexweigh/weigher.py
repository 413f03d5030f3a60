# lambda/lexweigh/weigher.py
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .errors import SegmentationError
from .model import TokenWeightTable, WeighedWord
from .observability import logger

# -------------------- Segmentation --------------------

def segment(word: str, table: TokenWeightTable) -> List[str]:
    """
    Split `word` into table tokens, always taking the longest token that
    matches at the current position.

    Raises SegmentationError as soon as nothing in the table matches the
    rest of the word.
    """
    tokens: List[str] = []
    rest = word
    while rest:
        last_len = len(rest)
        token = table.longest_prefix(rest)
        if token:
            tokens.append(token)
            rest = rest[len(token):]
        if len(rest) == last_len:
            raise SegmentationError(word, rest)
    return tokens


def weigh(word: str, table: Optional[TokenWeightTable]) -> float:
    """
    Total weight of `word`: the sum of its greedily matched token weights,
    or its length when there is no table (length mode).
    """
    if table is None:
        return float(len(word))
    tokens = segment(word, table)
    total = float(sum(table.weight_of(t) for t in tokens))
    logger.debug("Word weighed", extra={"word": word, "tokens": tokens, "weight": total})
    return total


# -------------------- Sorting --------------------

def weigh_words(words: Iterable[str], table: Optional[TokenWeightTable]) -> List[WeighedWord]:
    """
    Weigh each word once and return them lightest first.
    Python's sort is stable, so equal weights keep their input order.
    """
    weighed = [WeighedWord(word=w, weight=weigh(w, table)) for w in words]
    weighed.sort(key=lambda ww: ww.weight)
    return weighed


def sort_words(words: Sequence[str], table: Optional[TokenWeightTable]) -> List[str]:
    return [ww.word for ww in weigh_words(words, table)]
