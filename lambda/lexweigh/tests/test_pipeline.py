# lambda/lexweigh/tests/test_pipeline.py
import pytest

from lexweigh.config import RunOptions, read_words
from lexweigh.errors import CountMismatchWarning, DefinitionFormatError, EmptyTableError, SegmentationError
from lexweigh.pipeline import run

RULES = "1 a i u; 2 k t n; 4 sh;"


def test_run_pairs_lightest_words_with_lightest_definitions():
    options = RunOptions(
        words=["shuki", "ta", "nika", "ku"],
        definitions=["3 house\n", "1 I\n", "2 water\n", "4 mountain\n"],
        rules=RULES,
    )
    result = run(options)
    assert [(p.word, p.definition) for p in result.pairs] == [
        ("ta", "I\n"),
        ("ku", "water\n"),
        ("nika", "house\n"),
        ("shuki", "mountain\n"),
    ]
    assert [p.weight for p in result.pairs] == [3.0, 3.0, 6.0, 8.0]


def test_run_length_mode_without_rules():
    result = run(RunOptions(words=["abc", "a", "ab"], definitions=["x\n", "y\n", "z\n"], presorted=True))
    assert [(p.word, p.definition) for p in result.pairs] == [("a", "x\n"), ("ab", "y\n"), ("abc", "z\n")]


def test_run_reports_discarded_definitions():
    with pytest.warns(CountMismatchWarning):
        result = run(RunOptions(words=["ta"], definitions=["1 I\n", "2 you\n"], rules=RULES))
    assert len(result.pairs) == 1
    assert result.discarded_definitions == 1


@pytest.mark.parametrize(
    "options, error",
    [
        (RunOptions(words=["ta"], definitions=["1 I\n"], rules="# nothing"), EmptyTableError),
        (RunOptions(words=["tax"], definitions=["1 I\n"], rules=RULES), SegmentationError),
        (RunOptions(words=["ta"], definitions=["I\n"], rules=RULES), DefinitionFormatError),
    ],
)
def test_run_structural_failures_abort(options, error):
    with pytest.raises(error):
        run(options)


def test_read_words_skips_blank_lines(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("ta\n\nku\r\n  \nnika", encoding="utf-8")
    assert read_words(path) == ["ta", "ku", "nika"]
