"""Core logic: safe stat reads, hero comparison, selection reducer."""

from superheroengine.core.compare import (
    CategoryResult,
    ComparisonResult,
    Side,
    compare,
    compare_stats,
    compare_values,
    overall_winner,
)
from superheroengine.core.selection import (
    SELECTION_CAPACITY,
    Selection,
    clear,
    is_comparison_eligible,
    toggle,
)
from superheroengine.core.stats import CANONICAL_STATS, StatKind, StatReading, read_stat, safe_stat, stat_value

__all__ = [
    "CANONICAL_STATS",
    "StatKind",
    "StatReading",
    "read_stat",
    "safe_stat",
    "stat_value",
    "Side",
    "CategoryResult",
    "ComparisonResult",
    "compare_values",
    "compare_stats",
    "overall_winner",
    "compare",
    "SELECTION_CAPACITY",
    "Selection",
    "toggle",
    "clear",
    "is_comparison_eligible",
]
