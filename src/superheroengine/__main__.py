"""CLI entrypoint: python -m superheroengine [list|show|compare|app]."""

import json
import logging
import sys
from pathlib import Path

# Ensure src is on path when run as python -m superheroengine
if __name__ == "__main__":
    src = Path(__file__).resolve().parent.parent
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

from superheroengine.config import Config, config_from_env
from superheroengine.data.errors import DataLoadError, HeroNotFoundError, InvalidRequestError
from superheroengine.data.load import heroes_frame
from superheroengine.data.store import HeroStore
from superheroengine.service import compare_by_ids
from superheroengine.viz.text import format_comparison, format_superhero_markdown

logger = logging.getLogger("superheroengine")

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2


def _list(store: HeroStore) -> int:
    frame = heroes_frame(store.all()).drop(columns=["image"])
    print(frame.to_string(index=False))
    return EXIT_OK


def _show(store: HeroStore, hero_id: str | None, name: str | None) -> int:
    hero = store.find(name=name, hero_id=hero_id)
    if hero is None:
        print("Superhero not found", file=sys.stderr)
        return EXIT_NOT_FOUND
    print(format_superhero_markdown(hero))
    return EXIT_OK


def _compare(store: HeroStore, id1: str, id2: str, as_json: bool, card: str | None) -> int:
    try:
        result = compare_by_ids(store, id1, id2)
    except InvalidRequestError as e:
        print(f"Invalid request: {e}", file=sys.stderr)
        return EXIT_INVALID
    except HeroNotFoundError as e:
        print(f"Not found: {e} (missing: {e.missing_ids})", file=sys.stderr)
        return EXIT_NOT_FOUND
    hero_a, hero_b = store.require(result.id1), store.require(result.id2)
    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_comparison(result, hero_a, hero_b))
    if card:
        from superheroengine.viz.compare_card import render_comparison_card
        print("Saved:", render_comparison_card(hero_a, hero_b, result, outpath=card))
    return EXIT_OK


def _app(cfg: Config) -> int:
    import os
    import subprocess
    app_path = Path(__file__).resolve().parent / "app" / "streamlit_app.py"
    env = dict(os.environ)
    if cfg.data_path:
        env["SUPERHEROES_DATA"] = cfg.data_path
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(app_path)], check=True, env=env)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    import argparse
    from dataclasses import replace
    p = argparse.ArgumentParser(prog="superheroengine", description="SuperheroEngine")
    p.add_argument("--data", default=None, help="hero JSON path (default: SUPERHEROES_DATA or bundled)")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("list", help="table of all heroes")
    show = sub.add_parser("show", help="one hero as markdown")
    show.add_argument("--id", dest="hero_id", default=None)
    show.add_argument("--name", default=None)
    cmp_ = sub.add_parser("compare", help="compare two heroes by id")
    cmp_.add_argument("id1")
    cmp_.add_argument("id2")
    cmp_.add_argument("--json", action="store_true", help="print the raw comparison result")
    cmp_.add_argument("--card", default=None, help="also render a PNG card to this path")
    sub.add_parser("app", help="launch Streamlit UI")
    args = p.parse_args(argv)

    cfg = config_from_env()
    if args.data:
        cfg = replace(cfg, data_path=args.data)
    if args.log_level:
        cfg = replace(cfg, log_level=args.log_level.upper())
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s %(message)s")

    cmd = args.cmd or "list"
    if cmd == "app":
        return _app(cfg)
    try:
        store = HeroStore.from_path(config=cfg)
    except DataLoadError as e:
        logger.error("%s", e)
        return EXIT_NOT_FOUND
    if cmd == "list":
        return _list(store)
    if cmd == "show":
        return _show(store, args.hero_id, args.name)
    return _compare(store, args.id1, args.id2, args.json, args.card)


if __name__ == "__main__":
    sys.exit(main())
