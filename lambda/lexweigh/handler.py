# lambda/lexweigh/handler.py
from __future__ import annotations

import warnings
from typing import Any, Dict, List

from .config import RunOptions, clean_words
from .errors import ConfigError, CountMismatchWarning, LexweighError
from .model import LexiconResult
from .observability import ENV, logger, metrics, record_error, record_success
from .pipeline import run


def _lines(value: Any, field: str) -> List[str]:
    """Accept either a list of lines or one newline-separated string."""
    if isinstance(value, str):
        return value.splitlines(keepends=True)
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    raise ConfigError(f"'{field}' must be a string or a list of strings")


def _options_from_event(event: Dict[str, Any]) -> RunOptions:
    missing = [k for k in ("words", "definitions") if k not in event]
    if missing:
        raise ConfigError(f"missing required field(s): {', '.join(missing)}")

    rules = event.get("rules")
    if rules is not None and not isinstance(rules, str):
        raise ConfigError("'rules' must be a string")

    return RunOptions(
        words=clean_words(_lines(event["words"], "words")),
        definitions=_lines(event["definitions"], "definitions"),
        rules=rules,
        presorted=bool(event.get("sorted", False)),
    )


def _response(result: LexiconResult, mismatch: List[str]) -> Dict[str, Any]:
    return {
        "pairs": [
            {"word": p.word, "definition": p.definition.rstrip("\r\n"), "weight": p.weight}
            for p in result.pairs
        ],
        "discarded_definitions": result.discarded_definitions,
        "warnings": mismatch,
    }


@logger.inject_lambda_context
@metrics.log_metrics
def handler(event: Dict[str, Any], context):
    try:
        if not isinstance(event, dict):
            raise ConfigError("event must be a JSON object")
        request_id = event.get("request_id")
        if request_id:
            logger.set_correlation_id(request_id)

        options = _options_from_event(event)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", CountMismatchWarning)
            result = run(options)
        mismatch = [str(w.message) for w in caught if issubclass(w.category, CountMismatchWarning)]
        for message in mismatch:
            logger.warning(message)

        record_success(
            words=len(result.words),
            definitions=len(result.definitions),
            pairs=len(result.pairs),
            env=ENV,
        )
        logger.info("Lexicon built", extra={"words": len(result.words), "pairs": len(result.pairs)})
        return _response(result, mismatch)

    except LexweighError as exc:
        logger.exception("Lexicon build failed")
        record_error(env=ENV)
        return {"pairs": [], "discarded_definitions": 0, "warnings": [], "error": str(exc)}

    except Exception:
        logger.exception("Unhandled error")
        record_error(env=ENV)
        return {"pairs": [], "discarded_definitions": 0, "warnings": [], "error": "internal error"}
