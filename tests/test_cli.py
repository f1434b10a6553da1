"""CLI: list / show / compare against the bundled dataset and a temp file."""

import json
from pathlib import Path

from superheroengine.__main__ import EXIT_INVALID, EXIT_NOT_FOUND, EXIT_OK, main


def test_list(capsys) -> None:
    assert main(["list"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "A-Bomb" in out
    assert "intelligence" in out
    assert "cdn.jsdelivr" not in out


def test_show_by_name(capsys) -> None:
    assert main(["show", "--name", "ant-man"]) == EXIT_OK
    assert "• Intelligence: 100" in capsys.readouterr().out


def test_show_not_found(capsys) -> None:
    assert main(["show", "--id", "9999"]) == EXIT_NOT_FOUND
    assert "Superhero not found" in capsys.readouterr().err


def test_compare_json(capsys) -> None:
    assert main(["compare", "1", "2", "--json"]) == EXIT_OK
    body = json.loads(capsys.readouterr().out)
    assert body["overall_winner"] == "tie"
    assert len(body["categories"]) == 6


def test_compare_text(capsys) -> None:
    assert main(["compare", "1", "3"]) == EXIT_OK
    assert "Bane Wins!" in capsys.readouterr().out


def test_compare_invalid(capsys) -> None:
    assert main(["compare", "abc", "2"]) == EXIT_INVALID
    assert "must be valid numbers" in capsys.readouterr().err


def test_compare_not_found(capsys) -> None:
    assert main(["compare", "1", "9999"]) == EXIT_NOT_FOUND
    assert "One or both superheroes not found" in capsys.readouterr().err


def test_data_flag_and_load_error(tmp_path: Path, capsys) -> None:
    path = tmp_path / "heroes.json"
    path.write_text(json.dumps([{"id": 10, "name": "Solo"}]), encoding="utf-8")
    assert main(["--data", str(path), "list"]) == EXIT_OK
    assert "Solo" in capsys.readouterr().out
    assert main(["--data", str(tmp_path / "missing.json"), "list"]) == EXIT_NOT_FOUND
