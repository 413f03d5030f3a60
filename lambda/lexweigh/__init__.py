# lambda/lexweigh/__init__.py
from .config import RunOptions
from .definitions import rank_definitions
from .errors import (
    ConfigError,
    CountMismatchWarning,
    DefinitionFormatError,
    EmptyTableError,
    LexweighError,
    RuleParseError,
    SegmentationError,
)
from .model import LexiconPair, LexiconResult, Rule, TokenWeightTable, WeighedWord
from .pairing import format_pair, pair
from .pipeline import run
from .rules import build_table, load_table, parse_clause
from .weigher import segment, sort_words, weigh, weigh_words

__all__ = [
    "ConfigError",
    "CountMismatchWarning",
    "DefinitionFormatError",
    "EmptyTableError",
    "LexiconPair",
    "LexiconResult",
    "LexweighError",
    "Rule",
    "RuleParseError",
    "RunOptions",
    "SegmentationError",
    "TokenWeightTable",
    "WeighedWord",
    "build_table",
    "format_pair",
    "load_table",
    "pair",
    "parse_clause",
    "rank_definitions",
    "run",
    "segment",
    "sort_words",
    "weigh",
    "weigh_words",
]
