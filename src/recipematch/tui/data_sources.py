from __future__ import annotations

from difflib import SequenceMatcher
from typing import Sequence

from ..domain import Recipe, SelectionCategory
from .state import ItemInfo


def build_vocabulary(catalog: Sequence[Recipe]) -> dict[SelectionCategory, list[ItemInfo]]:
    vocabulary: dict[SelectionCategory, list[ItemInfo]] = {}
    for category in SelectionCategory:
        counts: dict[str, int] = {}
        for recipe in catalog:
            for tag in getattr(recipe, category.tag_field):
                counts[tag] = counts.get(tag, 0) + 1
        vocabulary[category] = [
            ItemInfo(category=category, value=tag, recipe_count=count)
            for tag, count in sorted(counts.items())
        ]
    return vocabulary


def fuzzy_filter(items: list[object], query: str, key) -> list[object]:
    q = query.strip().lower()
    if not q:
        return items

    scored: list[tuple[float, object]] = []
    for item in items:
        text = str(key(item)).lower()
        score = 1.0 if q in text else SequenceMatcher(None, q, text).ratio()
        if score >= 0.2:
            scored.append((score, item))

    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [item for _, item in scored]
