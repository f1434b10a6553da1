"""Read-only hero store: lookup by id or by name."""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from superheroengine.config import Config
from superheroengine.data.errors import HeroNotFoundError
from superheroengine.data.load import load_superheroes
from superheroengine.data.models import Superhero, coerce_hero_id

logger = logging.getLogger(__name__)


class HeroStore:
    """Immutable snapshot of heroes keyed by id. get() returns None for unknown ids."""

    def __init__(self, heroes: Iterable[Superhero]) -> None:
        self._heroes: List[Superhero] = list(heroes)
        self._by_id: Dict[int, Superhero] = {h.id: h for h in self._heroes}

    @classmethod
    def from_path(cls, path: Optional[str | Path] = None, config: Optional[Config] = None) -> "HeroStore":
        return cls(load_superheroes(path, config=config))

    def __len__(self) -> int:
        return len(self._heroes)

    def all(self) -> List[Superhero]:
        return list(self._heroes)

    def get(self, hero_id: Any) -> Optional[Superhero]:
        """Hero for an integer-like id, or None (unknown or non-numeric id)."""
        key = coerce_hero_id(hero_id)
        if key is None:
            return None
        return self._by_id.get(key)

    def require(self, hero_id: Any) -> Superhero:
        hero = self.get(hero_id)
        if hero is None:
            raise HeroNotFoundError("Superhero not found", missing_ids=[hero_id])
        return hero

    def find(self, name: Optional[str] = None, hero_id: Optional[Any] = None) -> Optional[Superhero]:
        """
        First hero whose name matches (case-insensitive) or whose id matches as a string.
        Either argument may be omitted; returns None when nothing matches.
        """
        name_lc = name.lower() if name else ""
        id_str = str(hero_id).strip() if hero_id is not None else ""
        for hero in self._heroes:
            if name_lc and hero.name.lower() == name_lc:
                return hero
            if id_str and str(hero.id) == id_str:
                return hero
        logger.debug("No hero for name=%r id=%r", name, hero_id)
        return None

    def powerstats(self, hero_id: Any) -> Mapping[str, Any]:
        """Raw powerstats for a hero; raises HeroNotFoundError."""
        return dict(self.require(hero_id).powerstats)
