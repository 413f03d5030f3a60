# lambda/lexweigh/tests/test_handler.py
from unittest.mock import MagicMock

from lexweigh.handler import handler

RULES = "1 a o; 2 k t; 3 sh;"


def test_handler_returns_pairs():
    event = {
        "rules": RULES,
        "words": ["shok", "ta", "ko"],
        "definitions": "2 water\n1 I\n3 fire\n",
        "request_id": "req-1",
    }
    res = handler(event, MagicMock())
    assert res["pairs"] == [
        {"word": "ta", "definition": "I", "weight": 3.0},
        {"word": "ko", "definition": "water", "weight": 3.0},
        {"word": "shok", "definition": "fire", "weight": 6.0},
    ]
    assert res["discarded_definitions"] == 0
    assert res["warnings"] == []


def test_handler_reports_count_mismatch():
    event = {"words": "ab\na\n", "definitions": ["x", "y", "z"], "sorted": True}
    res = handler(event, MagicMock())
    assert [p["word"] for p in res["pairs"]] == ["a", "ab"]
    assert res["discarded_definitions"] == 1
    assert len(res["warnings"]) == 1


def test_handler_missing_fields_is_error():
    res = handler({"words": ["ta"]}, MagicMock())
    assert res["pairs"] == []
    assert "definitions" in res["error"]


def test_handler_segmentation_error():
    res = handler({"rules": RULES, "words": ["tax"], "definitions": ["1 I"]}, MagicMock())
    assert res["pairs"] == []
    assert "no token recognized" in res["error"]


def test_handler_rejects_non_object_event():
    res = handler(["ta", "ku"], MagicMock())
    assert res["pairs"] == []
    assert "JSON object" in res["error"]
