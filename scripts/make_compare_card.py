#!/usr/bin/env python3
"""
Generate outputs/compare.png for two heroes from the hero JSON.

Usage (from repo root):
  python scripts/make_compare_card.py 1 2
  python scripts/make_compare_card.py 1 3 --data path/to/superheroes.json --out outputs/a_vs_b.png
"""

import argparse
import sys
from pathlib import Path

repo = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(repo / "src"))

from superheroengine.config import DEFAULT_CONFIG
from superheroengine.__main__ import EXIT_INVALID, EXIT_NOT_FOUND, EXIT_OK
from superheroengine.data.errors import DataLoadError, HeroNotFoundError, InvalidRequestError
from superheroengine.data.store import HeroStore
from superheroengine.service import compare_by_ids
from superheroengine.viz.compare_card import render_comparison_card


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Render a hero comparison card")
    p.add_argument("id1")
    p.add_argument("id2")
    p.add_argument("--data", default=None)
    p.add_argument("--out", default=str(repo / DEFAULT_CONFIG.card_outpath))
    args = p.parse_args(argv)

    try:
        store = HeroStore.from_path(args.data)
    except DataLoadError as e:
        print(e, file=sys.stderr)
        return EXIT_NOT_FOUND
    try:
        result = compare_by_ids(store, args.id1, args.id2)
    except InvalidRequestError as e:
        print(f"Invalid request: {e}", file=sys.stderr)
        return EXIT_INVALID
    except HeroNotFoundError as e:
        print(f"Not found: {e} (missing: {e.missing_ids})", file=sys.stderr)
        return EXIT_NOT_FOUND
    path = render_comparison_card(store.require(result.id1), store.require(result.id2), result, outpath=args.out)
    print("Saved:", path)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
