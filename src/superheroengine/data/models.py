"""Superhero record as loaded from the hero JSON."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

from superheroengine.core.stats import CANONICAL_STATS, Number, read_stat, stat_value
from superheroengine.data.errors import InvalidHeroRecordError


def coerce_hero_id(raw: Any) -> int | None:
    """Integer-like id (7, "7", 7.0) -> int; anything else -> None."""
    reading = read_stat(raw)
    if not reading.ok or not isinstance(reading.value, int):
        return None
    return reading.value


@dataclass(frozen=True)
class Superhero:
    """
    One hero: id, display name, image URL, and raw powerstats.

    powerstats is kept exactly as loaded (values may be junk); read it through
    stats() or core.stats.stat_value, never directly.
    """

    id: int
    name: str
    image: str = ""
    powerstats: Mapping[str, Any] = field(default_factory=dict, hash=False)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Superhero":
        if not isinstance(record, Mapping):
            raise InvalidHeroRecordError(f"Hero record must be an object, got {type(record).__name__}", record=record)
        hero_id = coerce_hero_id(record.get("id"))
        if hero_id is None:
            raise InvalidHeroRecordError(f"Hero record has no integer id: {record.get('id')!r}", record=record)
        powerstats = record.get("powerstats")
        stats = MappingProxyType(dict(powerstats)) if isinstance(powerstats, Mapping) else MappingProxyType({})
        return cls(
            id=hero_id,
            name=str(record.get("name") or ""),
            image=str(record.get("image") or ""),
            powerstats=stats,
        )

    def stats(self) -> Dict[str, Number]:
        """Canonical stats in order, safe-read (junk -> 0)."""
        return {name: stat_value(self.powerstats, name) for name in CANONICAL_STATS}

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "powerstats": dict(self.powerstats),
        }
