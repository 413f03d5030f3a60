# lambda/lexweigh/tests/test_pairing.py
import warnings

import pytest

from lexweigh.errors import CountMismatchWarning
from lexweigh.model import LexiconPair, WeighedWord
from lexweigh.pairing import format_pair, pair


def _words(*names):
    return [WeighedWord(word=n, weight=float(i)) for i, n in enumerate(names)]


def test_more_definitions_than_words_warns_and_truncates():
    with pytest.warns(CountMismatchWarning):
        pairs = pair(_words("ka", "lo"), ["one\n", "two\n", "three\n"])
    assert [(p.word, p.definition) for p in pairs] == [("ka", "one\n"), ("lo", "two\n")]


def test_more_words_than_definitions_is_silent():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        pairs = pair(_words("ka", "lo", "mi"), ["one\n", "two\n"])
    assert len(pairs) == 2
    assert pairs[-1].word == "lo"


def test_pair_carries_word_weight():
    pairs = pair([WeighedWord("ta", 2.5)], ["sun\n"])
    assert pairs == [LexiconPair(word="ta", definition="sun\n", weight=2.5)]


def test_format_pair_keeps_line_ending():
    assert format_pair(LexiconPair("ta", "sun\n")) == "ta\tsun\n"
    assert format_pair(LexiconPair("ta", "sun")) == "ta\tsun\n"
    assert format_pair(LexiconPair("ta", "sun\r\n")) == "ta\tsun\r\n"
