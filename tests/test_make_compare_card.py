"""scripts/make_compare_card.py: exit codes match the CLI, bad --data is reported, not raised."""

import importlib.util
import json
from pathlib import Path

import pytest

from superheroengine.__main__ import EXIT_INVALID, EXIT_NOT_FOUND, EXIT_OK

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "make_compare_card.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("make_compare_card", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def data(tmp_path: Path) -> Path:
    path = tmp_path / "heroes.json"
    path.write_text(json.dumps([
        {"id": 1, "name": "One", "powerstats": {"speed": 3}},
        {"id": 2, "name": "Two", "powerstats": {"speed": 1}},
    ]), encoding="utf-8")
    return path


def test_missing_data_file(script, tmp_path: Path, capsys) -> None:
    assert script.main(["1", "2", "--data", str(tmp_path / "missing.json")]) == EXIT_NOT_FOUND
    assert "Failed to load superheroes data" in capsys.readouterr().err


def test_invalid_ids(script, data: Path, capsys) -> None:
    assert script.main(["abc", "2", "--data", str(data)]) == EXIT_INVALID
    assert "must be valid numbers" in capsys.readouterr().err


def test_unknown_id(script, data: Path, capsys) -> None:
    assert script.main(["1", "9999", "--data", str(data)]) == EXIT_NOT_FOUND
    assert "One or both superheroes not found" in capsys.readouterr().err


@pytest.mark.slow
def test_renders_card(script, data: Path, tmp_path: Path, capsys) -> None:
    out = tmp_path / "card.png"
    assert script.main(["1", "2", "--data", str(data), "--out", str(out)]) == EXIT_OK
    assert out.exists()
    assert "Saved:" in capsys.readouterr().out
