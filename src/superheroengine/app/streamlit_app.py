"""Minimal Streamlit app: hero table, pick two, compare, back to table."""

from typing import Optional

import streamlit as st

from superheroengine.config import config_from_env
from superheroengine.core.compare import ComparisonResult, Side, compare
from superheroengine.core.selection import (
    SELECTION_CAPACITY,
    Selection,
    clear,
    is_comparison_eligible,
    toggle,
)
from superheroengine.core.stats import CANONICAL_STATS
from superheroengine.data.errors import DataLoadError
from superheroengine.data.models import Superhero
from superheroengine.data.store import HeroStore
from superheroengine.viz.text import final_result_line, stat_label

# Per-browser-session state keys
SELECTION_KEY = "selection"
VIEW_KEY = "view"
RESULT_KEY = "comparison"


@st.cache_resource
def _load_store(data_path: Optional[str]) -> HeroStore:
    return HeroStore.from_path(data_path)


def _session_selection() -> Selection:
    if SELECTION_KEY not in st.session_state:
        st.session_state[SELECTION_KEY] = clear()
    return st.session_state[SELECTION_KEY]


def _on_toggle(hero: Superhero) -> None:
    st.session_state[SELECTION_KEY] = toggle(_session_selection(), hero)


def _on_compare() -> None:
    selection = _session_selection()
    if not is_comparison_eligible(selection):
        return
    hero_a, hero_b = selection.pair()
    st.session_state[RESULT_KEY] = compare(hero_a, hero_b)
    st.session_state[VIEW_KEY] = "comparison"


def _on_back() -> None:
    st.session_state[SELECTION_KEY] = clear()
    st.session_state[RESULT_KEY] = None
    st.session_state[VIEW_KEY] = "table"


def _render_table(store: HeroStore) -> None:
    selection = _session_selection()
    st.title("Superheroes")
    st.write(f"Select {SELECTION_CAPACITY} superheroes to compare ({len(selection)}/{SELECTION_CAPACITY} selected)")
    if len(selection):
        st.caption("Selected: " + ", ".join(h.name for h in selection))
    st.button("Compare Heroes", on_click=_on_compare, disabled=not is_comparison_eligible(selection))

    header = st.columns([1, 1, 3, 2] + [2] * len(CANONICAL_STATS))
    for col, label in zip(header, ["Select", "ID", "Name", "Image"] + [stat_label(s) for s in CANONICAL_STATS]):
        col.markdown(f"**{label}**")
    for hero in store.all():
        key = f"pick_{hero.id}"
        # Widget state follows the reducer (eviction unchecks the oldest pick)
        st.session_state[key] = selection.contains(hero.id)
        row = st.columns([1, 1, 3, 2] + [2] * len(CANONICAL_STATS))
        row[0].checkbox("select", key=key, on_change=_on_toggle, args=(hero,), label_visibility="collapsed")
        row[1].write(hero.id)
        row[2].write(hero.name)
        if hero.image:
            row[3].image(hero.image, width=48)
        for col, value in zip(row[4:], hero.stats().values()):
            col.write(value)


def _render_comparison(result: ComparisonResult) -> None:
    selection = _session_selection()
    st.button("← Back to Heroes Table", on_click=_on_back)
    if not is_comparison_eligible(selection):
        return
    hero_a, hero_b = selection.pair()
    st.title("Superhero Comparison")
    left, mid, right = st.columns([3, 1, 3])
    with left:
        if hero_a.image:
            st.image(hero_a.image)
        st.header(hero_a.name)
    mid.header("VS")
    with right:
        if hero_b.image:
            st.image(hero_b.image)
        st.header(hero_b.name)

    for c in result.categories:
        a, name, b = st.columns([2, 3, 2])
        a.markdown(f"**{c.id1_value}**" if c.winner is Side.FIRST else str(c.id1_value))
        name.write(stat_label(c.name))
        b.markdown(f"**{c.id2_value}**" if c.winner is Side.SECOND else str(c.id2_value))

    st.header("Final Result")
    icon = "🤝" if result.overall_winner is Side.TIE else "🏆"
    st.subheader(f"{icon} {final_result_line(result, hero_a, hero_b)}")
    st.write(f"Score: {result.score_line()}")
    with st.expander("Raw result"):
        st.json(result.to_dict())


def run_app(data_path: Optional[str] = None) -> None:
    """Run Streamlit UI. data_path defaults to SUPERHEROES_DATA or the bundled dataset."""
    cfg = config_from_env()
    try:
        store = _load_store(data_path or cfg.data_path)
    except DataLoadError as e:
        st.error(str(e))
        return
    result = st.session_state.get(RESULT_KEY)
    if st.session_state.get(VIEW_KEY) == "comparison" and result is not None:
        _render_comparison(result)
    else:
        _render_table(store)


if __name__ == "__main__":
    run_app()
