"""
Load superheroes from the hero JSON file.

The file is a JSON array of {id, name, image, powerstats} objects. Stat values are not
trusted (read via core.stats); ids must be integer-like and unique. Any I/O, parse, or
shape problem fails fast with DataLoadError.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

from superheroengine.config import Config, config_from_env
from superheroengine.core.stats import CANONICAL_STATS
from superheroengine.data.errors import DataLoadError, InvalidHeroRecordError
from superheroengine.data.models import Superhero

logger = logging.getLogger(__name__)

# Table columns, in display order
FRAME_COLUMNS = ["id", "name", "image", *CANONICAL_STATS]


def parse_superheroes(records: object, source: str = "<memory>") -> List[Superhero]:
    """Validate a decoded JSON document and build Superhero records."""
    if not isinstance(records, list):
        raise DataLoadError(
            f"Failed to load superheroes data: expected a JSON array in {source}, got {type(records).__name__}",
            path=source,
        )
    heroes: List[Superhero] = []
    seen: set[int] = set()
    for i, record in enumerate(records):
        try:
            hero = Superhero.from_record(record)
        except InvalidHeroRecordError as e:
            raise DataLoadError(f"Failed to load superheroes data: record {i} in {source}: {e}", path=source) from e
        if hero.id in seen:
            raise DataLoadError(f"Failed to load superheroes data: duplicate id {hero.id} in {source}", path=source)
        seen.add(hero.id)
        heroes.append(hero)
    return heroes


def load_superheroes(
    path: Optional[str | Path] = None,
    config: Optional[Config] = None,
) -> List[Superhero]:
    """
    Load heroes from path, else config.data_path (default: SUPERHEROES_DATA), else the bundled dataset.
    Raises DataLoadError if the file is missing, unreadable, not JSON, or mis-shaped.
    """
    cfg = config or config_from_env()
    src = Path(path) if path is not None else cfg.resolved_data_path()
    logger.info("Loading superheroes from %s", src)
    try:
        text = src.read_text(encoding="utf-8")
    except OSError as e:
        raise DataLoadError(f"Failed to load superheroes data: {e}", path=src) from e
    try:
        records = json.loads(text)
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Failed to load superheroes data: invalid JSON in {src}: {e}", path=src) from e
    heroes = parse_superheroes(records, source=str(src))
    logger.info("Loaded %d superheroes from %s", len(heroes), src)
    return heroes


def heroes_frame(heroes: Iterable[Superhero]) -> pd.DataFrame:
    """One row per hero: id, name, image, then canonical stats (safe-read, junk -> 0)."""
    rows = [{"id": h.id, "name": h.name, "image": h.image, **h.stats()} for h in heroes]
    if not rows:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)
