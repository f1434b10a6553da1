"""
Slide-ready hero comparison: two names, one bar pair per stat, winners highlighted, final result.
"""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from superheroengine.core.compare import ComparisonResult, Side  # noqa: E402
from superheroengine.data.models import Superhero  # noqa: E402
from superheroengine.viz.text import final_result_line, stat_label  # noqa: E402

COLOR_A = "#1a5276"
COLOR_B = "#922b21"
COLOR_DIM = "#c8c8c8"


def render_comparison_card(
    hero_a: Superhero,
    hero_b: Superhero,
    result: ComparisonResult,
    outpath: str = "outputs/compare.png",
) -> str:
    """
    Render a comparison PNG: mirrored horizontal bars per category (hero A left, hero B
    right). Losing/tied bars are dimmed. Returns the resolved output path.
    """
    path = Path(outpath)
    path.parent.mkdir(parents=True, exist_ok=True)
    cats = list(result.categories)
    n = len(cats)
    top = max([1] + [max(c.id1_value, c.id2_value) for c in cats])

    fig, ax = plt.subplots(figsize=(12, 8), dpi=150)
    fig.patch.set_facecolor("white")
    fig.suptitle(f"{hero_a.name}  vs  {hero_b.name}", fontsize=26, fontweight="bold")
    for i, c in enumerate(cats):
        y = n - 1 - i
        color_a = COLOR_A if c.winner is Side.FIRST else COLOR_DIM
        color_b = COLOR_B if c.winner is Side.SECOND else COLOR_DIM
        ax.barh(y, -c.id1_value, height=0.6, color=color_a)
        ax.barh(y, c.id2_value, height=0.6, color=color_b)
        ax.text(-top * 1.02, y, str(c.id1_value), ha="right", va="center", fontsize=13)
        ax.text(top * 1.02, y, str(c.id2_value), ha="left", va="center", fontsize=13)
    ax.set_yticks(range(n))
    ax.set_yticklabels([stat_label(c.name) for c in reversed(cats)], fontsize=14)
    ax.set_xlim(-top * 1.2, top * 1.2)
    ax.axvline(0, color="black", linewidth=1)
    ax.set_xticks([])
    for side in ("top", "right", "bottom"):
        ax.spines[side].set_visible(False)
    ax.text(0.25, 1.02, hero_a.name, ha="center", fontsize=16, color=COLOR_A, fontweight="bold", transform=ax.transAxes)
    ax.text(0.75, 1.02, hero_b.name, ha="center", fontsize=16, color=COLOR_B, fontweight="bold", transform=ax.transAxes)
    fig.text(
        0.5, 0.03,
        f"{final_result_line(result, hero_a, hero_b)}  Score: {result.score_line()}",
        ha="center", fontsize=18, fontweight="bold",
    )
    plt.savefig(path, dpi=150, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    return str(path.resolve())
