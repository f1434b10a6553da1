"""
Bounded hero selection (capacity 2) as a pure reducer.

toggle(): selected -> removed; fewer than 2 -> appended; already 2 -> oldest (index 0)
evicted and the new hero appended. clear() resets to empty. Only a full selection is
eligible for comparison.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

SELECTION_CAPACITY = 2


@dataclass(frozen=True)
class Selection:
    """Ordered, oldest first. Holds hero references (anything with .id)."""

    heroes: Tuple[Any, ...] = ()

    def __len__(self) -> int:
        return len(self.heroes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.heroes)

    @property
    def ids(self) -> Tuple[Any, ...]:
        return tuple(h.id for h in self.heroes)

    def contains(self, hero_id: Any) -> bool:
        return any(h.id == hero_id for h in self.heroes)

    def pair(self) -> Tuple[Any, Any]:
        """The two selected heroes in selection order. Raises ValueError unless eligible."""
        if not is_comparison_eligible(self):
            raise ValueError(f"Need {SELECTION_CAPACITY} heroes selected to compare, have {len(self)}")
        return self.heroes[0], self.heroes[1]


def toggle(selection: Selection, hero: Any) -> Selection:
    """Next selection after the user toggles hero. Never mutates selection."""
    if selection.contains(hero.id):
        return Selection(tuple(h for h in selection.heroes if h.id != hero.id))
    if len(selection) < SELECTION_CAPACITY:
        return Selection(selection.heroes + (hero,))
    # Full: slide the window, oldest out
    return Selection(selection.heroes[1:] + (hero,))


def clear() -> Selection:
    """Empty selection (leaving the comparison view)."""
    return Selection()


def is_comparison_eligible(selection: Selection) -> bool:
    return len(selection) == SELECTION_CAPACITY
