"""Hero data: JSON loading, records, lookup."""

from superheroengine.data.errors import (
    DataLoadError,
    HeroNotFoundError,
    InvalidHeroRecordError,
    InvalidRequestError,
    SuperheroEngineError,
)
from superheroengine.data.load import heroes_frame, load_superheroes, parse_superheroes
from superheroengine.data.models import Superhero
from superheroengine.data.store import HeroStore

__all__ = [
    "Superhero",
    "HeroStore",
    "load_superheroes",
    "parse_superheroes",
    "heroes_frame",
    "SuperheroEngineError",
    "DataLoadError",
    "InvalidHeroRecordError",
    "InvalidRequestError",
    "HeroNotFoundError",
]
