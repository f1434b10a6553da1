"""Tests for data layer: JSON loading, record parsing, store lookup, table frame, config."""

import json
from pathlib import Path

import pytest

from superheroengine.config import BUNDLED_DATA_PATH, DATA_PATH_ENV, LOG_LEVEL_ENV, Config, config_from_env
from superheroengine.core.stats import CANONICAL_STATS
from superheroengine.data.errors import DataLoadError, HeroNotFoundError, InvalidHeroRecordError
from superheroengine.data.load import FRAME_COLUMNS, heroes_frame, load_superheroes, parse_superheroes
from superheroengine.data.models import Superhero
from superheroengine.data.store import HeroStore


def _write(tmp_path: Path, payload, name: str = "heroes.json") -> Path:
    path = tmp_path / name
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


def test_bundled_dataset_loads(monkeypatch) -> None:
    monkeypatch.delenv(DATA_PATH_ENV, raising=False)
    heroes = load_superheroes()
    assert BUNDLED_DATA_PATH.exists()
    by_id = {h.id: h for h in heroes}
    assert by_id[1].name == "A-Bomb"
    assert dict(by_id[2].powerstats) == {
        "intelligence": 100, "strength": 18, "speed": 23, "durability": 28, "power": 32, "combat": 32,
    }


def test_load_from_path(tmp_path: Path) -> None:
    path = _write(tmp_path, [{"id": "7", "name": "Test Hero", "image": "test.jpg", "powerstats": {"speed": "9"}}])
    heroes = load_superheroes(path)
    assert heroes == [Superhero(id=7, name="Test Hero", image="test.jpg", powerstats={"speed": "9"})]
    assert heroes[0].stats()["speed"] == 9


def test_load_uses_config_path(tmp_path: Path) -> None:
    path = _write(tmp_path, [{"id": 1, "name": "Only"}])
    heroes = load_superheroes(config=Config(data_path=str(path)))
    assert [h.name for h in heroes] == ["Only"]


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError, match="Failed to load superheroes data") as exc:
        load_superheroes(tmp_path / "nope.json")
    assert exc.value.path.endswith("nope.json")


def test_load_invalid_json(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError, match="invalid JSON"):
        load_superheroes(_write(tmp_path, "[{not json"))


def test_load_not_a_list(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError, match="expected a JSON array"):
        load_superheroes(_write(tmp_path, {"id": 1}))


def test_load_duplicate_ids(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError, match="duplicate id 1"):
        load_superheroes(_write(tmp_path, [{"id": 1}, {"id": "1"}]))


def test_load_record_without_id(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError, match="record 1"):
        load_superheroes(_write(tmp_path, [{"id": 1}, {"name": "Nobody"}]))


@pytest.mark.parametrize("bad_id", [None, "abc", 1.5, True, []])
def test_from_record_rejects_bad_ids(bad_id) -> None:
    with pytest.raises(InvalidHeroRecordError):
        Superhero.from_record({"id": bad_id, "name": "x"})


def test_from_record_rejects_non_mapping() -> None:
    with pytest.raises(InvalidHeroRecordError, match="must be an object"):
        Superhero.from_record(["id", 1])


def test_from_record_tolerates_junk_stats() -> None:
    h = Superhero.from_record({"id": 3, "name": "Hero With Missing Stats", "powerstats": {"intelligence": "invalid"}})
    assert h.stats() == {name: 0 for name in CANONICAL_STATS}
    assert h.image == ""
    assert h.to_record() == {"id": 3, "name": "Hero With Missing Stats", "image": "", "powerstats": {"intelligence": "invalid"}}


def test_parse_superheroes_in_memory() -> None:
    heroes = parse_superheroes([{"id": 1, "name": "A"}, {"id": 2, "name": "B"}])
    assert [h.id for h in heroes] == [1, 2]


def test_heroes_frame_columns_and_safe_values() -> None:
    heroes = parse_superheroes([
        {"id": 1, "name": "A", "image": "a.jpg", "powerstats": {"speed": "40", "power": None}},
        {"id": 2, "name": "B"},
    ])
    df = heroes_frame(heroes)
    assert list(df.columns) == FRAME_COLUMNS
    assert df.loc[0, "speed"] == 40
    assert df.loc[0, "power"] == 0
    assert df.loc[1, "combat"] == 0


def test_heroes_frame_empty() -> None:
    df = heroes_frame([])
    assert df.empty
    assert list(df.columns) == FRAME_COLUMNS


def test_store_get_and_require(store: HeroStore) -> None:
    assert len(store) == 3
    assert store.get(1).name == "A-Bomb"
    assert store.get("2").name == "Ant-Man"
    assert store.get(9999) is None
    assert store.get("abc") is None
    with pytest.raises(HeroNotFoundError) as exc:
        store.require(9999)
    assert exc.value.missing_ids == [9999]


def test_store_find_by_name_or_id(store: HeroStore) -> None:
    assert store.find(name="bane").id == 3
    assert store.find(name="ANT-MAN").id == 2
    assert store.find(hero_id="1").name == "A-Bomb"
    assert store.find(hero_id=3).name == "Bane"
    assert store.find(name="nobody") is None
    assert store.find() is None


def test_store_powerstats(store: HeroStore) -> None:
    assert store.powerstats(2)["intelligence"] == 100
    with pytest.raises(HeroNotFoundError):
        store.powerstats("xyz")


def test_store_from_path(tmp_path: Path) -> None:
    store = HeroStore.from_path(_write(tmp_path, [{"id": 5, "name": "Five"}]))
    assert [h.name for h in store.all()] == ["Five"]


def test_config_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv(DATA_PATH_ENV, str(tmp_path / "x.json"))
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    cfg = config_from_env()
    assert cfg.resolved_data_path() == tmp_path / "x.json"
    assert cfg.log_level == "DEBUG"


def test_config_defaults(monkeypatch) -> None:
    monkeypatch.delenv(DATA_PATH_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    cfg = config_from_env()
    assert cfg.data_path is None
    assert cfg.resolved_data_path() == BUNDLED_DATA_PATH


def test_default_load_follows_env(monkeypatch, tmp_path: Path) -> None:
    path = _write(tmp_path, [{"id": 42, "name": "EnvOnly"}])
    monkeypatch.setenv(DATA_PATH_ENV, str(path))
    assert [h.name for h in load_superheroes()] == ["EnvOnly"]
    assert [h.id for h in HeroStore.from_path().all()] == [42]


def test_explicit_config_beats_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv(DATA_PATH_ENV, str(_write(tmp_path, [{"id": 1, "name": "FromEnv"}], name="env.json")))
    cfg = Config(data_path=str(_write(tmp_path, [{"id": 2, "name": "FromConfig"}], name="cfg.json")))
    assert [h.name for h in load_superheroes(config=cfg)] == ["FromConfig"]
