# lambda/lexweigh/model.py
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Rule:
    """
    One parsed clause of a rule file.
    - weight: cost assigned to every token of the clause
    - tokens: token strings in the order they were written
    """
    weight: float
    tokens: Tuple[str, ...]


@dataclass(frozen=True)
class TokenWeightTable:
    """
    Immutable token -> weight mapping plus the derived longest-first order.

    Build it with `from_weights` (or `rules.build_table`); the priority
    order is computed once there and never changes afterwards.
    """
    weights: Mapping[str, float]
    priority: Tuple[str, ...]

    @classmethod
    def from_weights(cls, weights: Dict[str, float]) -> "TokenWeightTable":
        # longest first; equal lengths fall back to lexicographic order
        priority = tuple(sorted(weights, key=lambda t: (-len(t), t)))
        return cls(weights=MappingProxyType(dict(weights)), priority=priority)

    def __len__(self) -> int:
        return len(self.weights)

    def __contains__(self, token: object) -> bool:
        return token in self.weights

    def __iter__(self) -> Iterator[str]:
        return iter(self.priority)

    def weight_of(self, token: str) -> float:
        return self.weights[token]

    def longest_prefix(self, text: str) -> Optional[str]:
        """Return the first token in priority order that starts `text`."""
        for token in self.priority:
            if text.startswith(token):
                return token
        return None


@dataclass(frozen=True)
class WeighedWord:
    word: str
    weight: float


@dataclass(frozen=True)
class LexiconPair:
    """A word matched with the definition at the same rank."""
    word: str
    definition: str
    weight: float = 0.0


@dataclass
class LexiconResult:
    words: List[WeighedWord] = field(default_factory=list)
    definitions: List[str] = field(default_factory=list)
    pairs: List[LexiconPair] = field(default_factory=list)

    @property
    def discarded_definitions(self) -> int:
        return max(0, len(self.definitions) - len(self.words))
