from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
import logging
from typing import Sequence

from .domain import Recipe, Selection, SelectionCategory


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryMatch:
    category: SelectionCategory
    matched: tuple[str, ...]
    selected: int


def percentage(score: float, maximum: float) -> int:
    if maximum <= 0:
        return 0
    value = Decimal(100 * score / maximum).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return max(0, min(100, int(value)))


def match_breakdown(recipe: Recipe, selection: Selection) -> list[CategoryMatch]:
    out: list[CategoryMatch] = []
    for category in SelectionCategory:
        chosen = selection.items(category)
        matched = tuple(tag for tag in recipe.tag_set(category.tag_field) if tag in chosen)
        out.append(CategoryMatch(category=category, matched=tuple(sorted(matched)), selected=len(chosen)))
    return out


def score_recipe(recipe: Recipe, selection: Selection) -> int:
    total_selected = selection.total_selected
    if total_selected == 0:
        return 0
    total_matches = sum(
        len(recipe.tag_set(category.tag_field) & selection.items(category)) for category in SelectionCategory
    )
    return percentage(total_matches, total_selected)


def rank(catalog: Sequence[Recipe], selection: Selection, limit: int) -> list[Recipe]:
    if limit < 1 or not catalog:
        return []

    snapshot = selection.snapshot()
    scored = [recipe.with_match(score_recipe(recipe, snapshot)) for recipe in catalog]
    # Stable sort: equal scores keep catalog order.
    scored.sort(key=lambda recipe: recipe.match_percentage or 0, reverse=True)
    logger.debug(
        "ranked %d recipes against %d selected items (limit %d)",
        len(scored),
        snapshot.total_selected,
        limit,
    )
    return scored[:limit]
