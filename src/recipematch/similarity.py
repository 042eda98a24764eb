from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Optional, Sequence

from .domain import Recipe
from .matching import percentage


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimilarityWeights:
    protein: float = 3.0
    veggie: float = 2.0
    herb: float = 1.5
    cookware: float = 1.0
    same_cuisine: float = 5.0
    preferred_cuisine: float = 3.0

    def tag_weights(self) -> tuple[tuple[str, float], ...]:
        return (
            ("protein_tags", self.protein),
            ("veggie_tags", self.veggie),
            ("herb_tags", self.herb),
            ("required_cookware", self.cookware),
        )


DEFAULT_WEIGHTS = SimilarityWeights()


def similarity_score(
    reference: Recipe,
    candidate: Recipe,
    preferred: frozenset[str] = frozenset(),
    weights: SimilarityWeights = DEFAULT_WEIGHTS,
) -> float:
    score = 0.0
    for name, weight in weights.tag_weights():
        score += len(reference.tag_set(name) & candidate.tag_set(name)) * weight

    candidate_cuisine = _cuisine_key(candidate.cuisine)
    if candidate_cuisine and candidate_cuisine == _cuisine_key(reference.cuisine):
        score += weights.same_cuisine
    if candidate_cuisine and candidate_cuisine in preferred:
        score += weights.preferred_cuisine
    return score


def max_similarity(
    reference: Recipe,
    preferred: frozenset[str] = frozenset(),
    weights: SimilarityWeights = DEFAULT_WEIGHTS,
) -> float:
    total = sum(len(reference.tag_set(name)) * weight for name, weight in weights.tag_weights())
    if reference.cuisine:
        total += weights.same_cuisine
    if preferred:
        total += weights.preferred_cuisine
    return total


def find_similar(
    reference: Optional[Recipe],
    catalog: Sequence[Recipe],
    count: int,
    preferred_cuisines: Optional[Iterable[str]] = None,
    *,
    weights: SimilarityWeights = DEFAULT_WEIGHTS,
) -> list[Recipe]:
    if reference is None or count < 1 or not catalog:
        return []

    preferred = cuisine_keys(preferred_cuisines)
    maximum = max_similarity(reference, preferred, weights)
    scored: list[tuple[float, Recipe]] = []
    for candidate in catalog:
        if candidate.id == reference.id:
            continue
        score = similarity_score(reference, candidate, preferred, weights)
        scored.append((score, candidate.with_match(percentage(score, maximum))))

    # Zero-overlap candidates stay in catalog order and backfill the tail.
    scored.sort(key=lambda pair: pair[0], reverse=True)
    logger.debug("scored %d similarity candidates for %s", len(scored), reference.id)
    return [recipe for _, recipe in scored[:count]]


def cuisine_keys(cuisines: Optional[Iterable[str]]) -> frozenset[str]:
    if not cuisines:
        return frozenset()
    if isinstance(cuisines, str):
        cuisines = [cuisines]
    return frozenset(key for key in (_cuisine_key(c) for c in cuisines) if key)


def _cuisine_key(cuisine: object) -> str:
    if not isinstance(cuisine, str):
        return ""
    return cuisine.strip().casefold()
