"""Text renderers: markdown hero card and plain-text comparison."""

from typing import List

from superheroengine.core.compare import ComparisonResult, Side
from superheroengine.core.stats import CANONICAL_STATS, stat_value
from superheroengine.data.models import Superhero


def stat_label(name: str) -> str:
    return name[:1].upper() + name[1:]


def format_superhero_markdown(hero: Superhero) -> str:
    """Markdown card: name, embedded image, and each canonical stat as a bullet."""
    lines = [
        f"Here is the data for {hero.name} retrieved using the superheroes MCP:",
        "",
        f"• Name: {hero.name}",
        f'• Image: <img src="{hero.image}" alt="{hero.name}"/>',
        "• Powerstats:",
    ]
    for name in CANONICAL_STATS:
        raw = hero.powerstats.get(name)
        shown = raw if raw is not None else stat_value(hero.powerstats, name)
        lines.append(f"  • {stat_label(name)}: {shown}")
    return "\n".join(lines)


def final_result_line(result: ComparisonResult, hero_a: Superhero, hero_b: Superhero) -> str:
    if result.overall_winner is Side.TIE:
        return "It's a Tie!"
    winner = hero_a if result.overall_winner is Side.FIRST else hero_b
    return f"{winner.name} Wins!"


def format_comparison(result: ComparisonResult, hero_a: Superhero, hero_b: Superhero) -> str:
    """
    Three-column table (hero A value | stat | hero B value) with a '*' on each category
    winner, then the final result and score (winner's count first).
    """
    width = max(len(hero_a.name), len(hero_b.name), 8)
    lines: List[str] = [
        f"{hero_a.name} vs {hero_b.name}",
        "",
        f"{hero_a.name:>{width}}  {'':^14}  {hero_b.name:<{width}}",
    ]
    for c in result.categories:
        left = f"{c.id1_value}{'*' if c.winner is Side.FIRST else ''}"
        right = f"{c.id2_value}{'*' if c.winner is Side.SECOND else ''}"
        lines.append(f"{left:>{width}}  {stat_label(c.name):^14}  {right:<{width}}")
    lines += [
        "",
        "Final Result",
        final_result_line(result, hero_a, hero_b),
        f"Score: {result.score_line()}",
    ]
    return "\n".join(lines)
