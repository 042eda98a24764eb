from __future__ import annotations

from typing import Any, Optional, Sequence

from .domain import TAG_FIELDS, Recipe
from .tags import normalize


def list_recipes(
    catalog: Sequence[Recipe],
    tag: Optional[str] = None,
    cuisine: Optional[str] = None,
) -> list[dict[str, Any]]:
    tag_key = normalize(tag) if tag else ""
    recipes: list[dict[str, Any]] = []
    for recipe in catalog:
        tags = recipe_tags(recipe)
        if tag_key and tag_key not in tags:
            continue
        if cuisine and (recipe.cuisine or "").lower() != cuisine.lower():
            continue
        recipes.append(summarize(recipe))
    return recipes


def recipe_tags(recipe: Recipe) -> list[str]:
    found: list[str] = []
    for name in TAG_FIELDS:
        for tag in getattr(recipe, name):
            if tag not in found:
                found.append(tag)
    return found


def summarize(recipe: Recipe) -> dict[str, Any]:
    summary: dict[str, Any] = {
        "id": recipe.id,
        "title": recipe.title,
        "cuisine": recipe.cuisine,
        "difficulty": recipe.difficulty.value,
        "cooking_time": recipe.cooking_time,
        "servings": recipe.servings,
        "tags": recipe_tags(recipe),
    }
    if recipe.match_percentage is not None:
        summary["match_percentage"] = recipe.match_percentage
    return summary
