# lambda/lexweigh/definitions.py
from __future__ import annotations

import re
from typing import List, Sequence, Tuple

from .errors import DefinitionFormatError

# leading weight, then whitespace, then the definition text
WEIGHTED_LINE_RE = re.compile(r"^\s*(\d+(?:\.\d*)?|\.\d+)\s+(.*)", re.DOTALL)


def _split_weighted(line: str) -> Tuple[float, str] | None:
    m = WEIGHTED_LINE_RE.match(line)
    if not m:
        return None
    return float(m.group(1)), m.group(2)


def _as_line(text: str) -> str:
    return text.rstrip("\r\n") + "\n"


def rank_definitions(lines: Sequence[str], presorted: bool = False) -> List[str]:
    """
    Order definition lines for pairing.

    With `presorted` the lines come back untouched. Otherwise every line
    must start with a numeric weight; lines are stable-sorted by it and the
    weight column is dropped. The whole input is checked before sorting, and
    the first line without a weight raises DefinitionFormatError.
    """
    if presorted:
        return list(lines)

    parsed: List[Tuple[float, str]] = []
    for number, line in enumerate(lines, start=1):
        split = _split_weighted(line)
        if split is None:
            raise DefinitionFormatError(number, line)
        parsed.append(split)

    parsed.sort(key=lambda item: item[0])
    return [_as_line(text) for _, text in parsed]
