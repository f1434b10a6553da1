"""Pytest conftest: ensure src is on path for superheroengine imports; shared heroes."""

import sys
from pathlib import Path

import pytest

src = Path(__file__).resolve().parent.parent / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from superheroengine.data.models import Superhero  # noqa: E402
from superheroengine.data.store import HeroStore  # noqa: E402


def hero(hero_id: int, name: str = "", **powerstats) -> Superhero:
    return Superhero.from_record({"id": hero_id, "name": name or f"Hero {hero_id}", "image": "", "powerstats": powerstats})


@pytest.fixture
def a_bomb() -> Superhero:
    return hero(1, "A-Bomb", intelligence=38, strength=100, speed=17, durability=80, power=24, combat=64)


@pytest.fixture
def ant_man() -> Superhero:
    return hero(2, "Ant-Man", intelligence=100, strength=18, speed=23, durability=28, power=32, combat=32)


@pytest.fixture
def bane() -> Superhero:
    return hero(3, "Bane", intelligence=88, strength=38, speed=23, durability=56, power=51, combat=95)


@pytest.fixture
def store(a_bomb: Superhero, ant_man: Superhero, bane: Superhero) -> HeroStore:
    return HeroStore([a_bomb, ant_man, bane])
