from __future__ import annotations

from datetime import date
import logging
import random
from typing import Iterable, Optional, Sequence

from .domain import Recipe
from .similarity import cuisine_keys


logger = logging.getLogger(__name__)

DEFAULT_PREFERRED_WEIGHT = 3.0


def random_recommendations(
    catalog: Sequence[Recipe],
    count: int,
    preferred_cuisines: Optional[Iterable[str]] = None,
    *,
    rng: Optional[random.Random] = None,
    preferred_weight: float = DEFAULT_PREFERRED_WEIGHT,
) -> list[Recipe]:
    if preferred_weight <= 1:
        raise ValueError(f"preferred_weight must be greater than 1, got {preferred_weight!r}")
    if count < 1 or not catalog:
        return []

    rng = random.Random() if rng is None else rng
    preferred = cuisine_keys(preferred_cuisines)
    boost = float(preferred_weight)
    pool = list(catalog)
    weights = [boost if _is_preferred(recipe, preferred) else 1.0 for recipe in pool]

    picked: list[Recipe] = []
    while pool and len(picked) < count:
        index = _weighted_index(weights, rng)
        picked.append(pool.pop(index))
        weights.pop(index)

    logger.debug("sampled %d of %d recipes (%d preferred cuisines)", len(picked), len(catalog), len(preferred))
    return picked


def featured_recipe(
    catalog: Sequence[Recipe],
    preferred_cuisines: Optional[Iterable[str]] = None,
    *,
    day: Optional[date] = None,
) -> Optional[Recipe]:
    if not catalog:
        return None

    day = date.today() if day is None else day
    seed = day_seed(day)
    preferred = cuisine_keys(preferred_cuisines)
    if preferred:
        matches = [recipe for recipe in catalog if _is_preferred(recipe, preferred)]
        if matches:
            return matches[seed % len(matches)]
    return catalog[seed % len(catalog)]


def day_seed(day: date) -> int:
    text = f"{day.year}-{day.month}-{day.day}"
    return sum(ord(ch) for ch in text)


def _is_preferred(recipe: Recipe, preferred: frozenset[str]) -> bool:
    if not preferred or not recipe.cuisine:
        return False
    return recipe.cuisine.strip().casefold() in preferred


def _weighted_index(weights: list[float], rng: random.Random) -> int:
    target = rng.random() * sum(weights)
    running = 0.0
    for index, weight in enumerate(weights):
        running += weight
        if target < running:
            return index
    return len(weights) - 1
