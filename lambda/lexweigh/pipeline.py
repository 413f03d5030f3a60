# lambda/lexweigh/pipeline.py
from __future__ import annotations

from .config import RunOptions
from .definitions import rank_definitions
from .model import LexiconResult
from .observability import logger
from .pairing import pair
from .rules import build_table
from .weigher import weigh_words


def run(options: RunOptions) -> LexiconResult:
    """
    Build the table, rank words and definitions, and pair them.
    Nothing is returned unless every stage succeeds.
    """
    if options.rules is not None:
        table = build_table(options.rules)
    else:
        # no rule file: one letter per phoneme, all of equal weight
        table = None
        logger.debug("No rules supplied, ordering words by length")

    words = weigh_words(options.words, table)
    logger.debug("Words sorted", extra={"count": len(words)})

    definitions = rank_definitions(options.definitions, presorted=options.presorted)
    logger.debug("Definitions ranked", extra={"count": len(definitions), "presorted": options.presorted})

    pairs = pair(words, definitions)
    return LexiconResult(words=words, definitions=definitions, pairs=pairs)
