# lambda/lexweigh/rules.py
from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .config import read_text
from .errors import EmptyTableError, RuleParseError
from .model import Rule, TokenWeightTable
from .observability import logger

# -------------------- Rule syntax --------------------
# <weight> <token> [<token> ...];   with # comments to end of line
COMMENT_RE = re.compile(r"#[^\n]*")
WHITESPACE_RE = re.compile(r"\s+")
ASSIGNMENT_RE = re.compile(r"\$\w+\s*=")
WEIGHT_RE = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")


def _normalize(text: str) -> str:
    text = COMMENT_RE.sub("", text)
    return WHITESPACE_RE.sub(" ", text)


def split_clauses(text: str) -> List[str]:
    """Strip comments, collapse whitespace and cut the text at each ';'."""
    return [clause.strip() for clause in _normalize(text).split(";")]


def parse_clause(clause: str) -> Optional[Rule]:
    """
    Parse one clause into a Rule.

    Returns None for an empty clause. Raises RuleParseError for variable
    assignments (an unsupported extension of the format) and for clauses
    whose first field is not a non-negative number.
    """
    clause = clause.strip()
    if not clause:
        return None
    if ASSIGNMENT_RE.search(clause):
        raise RuleParseError(clause, "unsupported rule type")

    weight, *tokens = clause.split()
    if not WEIGHT_RE.match(weight):
        raise RuleParseError(clause, "unsupported rule type")
    return Rule(weight=float(weight), tokens=tuple(tokens))


def parse_rules(text: str) -> List[Rule]:
    """Every usable rule of `text`, in file order. Bad clauses are logged and skipped."""
    rules: List[Rule] = []
    for clause in split_clauses(text):
        try:
            rule = parse_clause(clause)
        except RuleParseError as exc:
            logger.warning("Ignoring rule clause", extra={"clause": exc.clause, "reason": exc.reason})
            continue
        if rule is not None:
            rules.append(rule)
    return rules


def table_from_rules(rules: Iterable[Rule]) -> TokenWeightTable:
    weights: Dict[str, float] = {}
    for rule in rules:
        for token in rule.tokens:
            # a later rule overrides an earlier weight for the same token
            weights[token] = rule.weight
    if not weights:
        raise EmptyTableError()
    return TokenWeightTable.from_weights(weights)


def build_table(text: str) -> TokenWeightTable:
    """
    Build the token weight table from rule-file text.
    Raises EmptyTableError when no clause yields a token.
    """
    table = table_from_rules(parse_rules(text))
    logger.debug("Token table loaded", extra={
        "tokens": len(table),
        "weights": dict(table.weights),
    })
    return table


def load_table(path: str | Path) -> TokenWeightTable:
    return build_table(read_text(path))
