"""
Single source of truth for hero comparison. Enforces explicit TIE when values are equal.

Each canonical stat is won by the side with the strictly greater safe value; equal values
(including both defaulted to 0) are a TIE. Overall winner is the side that won more
categories; ties count for neither side and equal win counts (including 0-0) are a TIE.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple

from superheroengine.core.stats import CANONICAL_STATS, Number, stat_value

logger = logging.getLogger(__name__)


class Side(Enum):
    """Three-way winner; values are the wire encoding (1, 2, "tie")."""

    FIRST = 1
    SECOND = 2
    TIE = "tie"

    def to_json(self):
        return self.value

    def flipped(self) -> "Side":
        if self is Side.FIRST:
            return Side.SECOND
        if self is Side.SECOND:
            return Side.FIRST
        return Side.TIE


@dataclass(frozen=True)
class CategoryResult:
    """Result of comparing one stat between two heroes."""

    name: str
    id1_value: Number
    id2_value: Number
    winner: Side

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "winner": self.winner.to_json(),
            "id1_value": self.id1_value,
            "id2_value": self.id2_value,
        }


@dataclass(frozen=True)
class ComparisonResult:
    """Per-category results in canonical order plus the majority verdict."""

    id1: int
    id2: int
    categories: Tuple[CategoryResult, ...]
    overall_winner: Side

    @property
    def wins_first(self) -> int:
        return sum(1 for c in self.categories if c.winner is Side.FIRST)

    @property
    def wins_second(self) -> int:
        return sum(1 for c in self.categories if c.winner is Side.SECOND)

    @property
    def ties(self) -> int:
        return sum(1 for c in self.categories if c.winner is Side.TIE)

    def category(self, name: str) -> CategoryResult:
        for c in self.categories:
            if c.name == name:
                return c
        raise KeyError(name)

    def score_line(self) -> str:
        """'w-l' with the winner's count first; '<first>-<second>' on a tie."""
        if self.overall_winner is Side.SECOND:
            return f"{self.wins_second}-{self.wins_first}"
        return f"{self.wins_first}-{self.wins_second}"

    def to_dict(self) -> Dict[str, Any]:
        """Response shape consumed verbatim by renderers."""
        return {
            "id1": self.id1,
            "id2": self.id2,
            "categories": [c.to_dict() for c in self.categories],
            "overall_winner": self.overall_winner.to_json(),
        }


def compare_values(v1: Number, v2: Number) -> Side:
    """Strict greater-than; equal values are a TIE."""
    if v1 > v2:
        return Side.FIRST
    if v2 > v1:
        return Side.SECOND
    return Side.TIE


def compare_stats(
    stats_a: Any,
    stats_b: Any,
    stats: Sequence[str] = CANONICAL_STATS,
) -> Tuple[CategoryResult, ...]:
    """
    Compare two raw powerstats mappings over stats, in order.
    Missing or junk values read as 0 (see core.stats); no stat is ever skipped.
    """
    out: List[CategoryResult] = []
    for name in stats:
        v1 = stat_value(stats_a, name)
        v2 = stat_value(stats_b, name)
        out.append(CategoryResult(name=name, id1_value=v1, id2_value=v2, winner=compare_values(v1, v2)))
    return tuple(out)


def overall_winner(categories: Sequence[CategoryResult]) -> Side:
    """Majority of category wins. Ties count for neither side."""
    wins_1 = sum(1 for c in categories if c.winner is Side.FIRST)
    wins_2 = sum(1 for c in categories if c.winner is Side.SECOND)
    return compare_values(wins_1, wins_2)


def compare(hero_a: Any, hero_b: Any) -> ComparisonResult:
    """
    Compare two heroes (anything with .id and .powerstats) across CANONICAL_STATS.

    Pure and deterministic. Comparing a hero with itself is allowed and yields all TIEs.
    Callers must resolve both heroes before calling; this never looks anything up.
    """
    categories = compare_stats(hero_a.powerstats, hero_b.powerstats)
    verdict = overall_winner(categories)
    result = ComparisonResult(
        id1=hero_a.id,
        id2=hero_b.id,
        categories=categories,
        overall_winner=verdict,
    )
    logger.debug(
        "Compared id1=%s vs id2=%s: %s (%d-%d, %d ties)",
        result.id1, result.id2, verdict.name, result.wins_first, result.wins_second, result.ties,
    )
    return result
