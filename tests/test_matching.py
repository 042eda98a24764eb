from __future__ import annotations

from recipematch.domain import Difficulty, Recipe, Selection, SelectionCategory
from recipematch.matching import match_breakdown, percentage, rank, score_recipe


def _selection(**items: list[str]) -> Selection:
    return Selection.from_mapping(items)


# Purpose: verify ranking orders full, partial and zero matches.
def test_rank_orders_by_percentage(pork_catalog: list[Recipe]) -> None:
    results = rank(pork_catalog, _selection(proteins=["pork"], herbs=["garlic"]), 6)
    assert [(r.id, r.match_percentage) for r in results] == [("a", 100), ("b", 50), ("c", 0)]


# Purpose: verify an empty selection keeps catalog order at zero percent.
def test_rank_empty_selection(pork_catalog: list[Recipe]) -> None:
    results = rank(pork_catalog, Selection(), 6)
    assert [r.id for r in results] == ["a", "b", "c"]
    assert {r.match_percentage for r in results} == {0}


# Purpose: verify ties keep their catalog order.
def test_rank_ties_are_stable(pork_catalog: list[Recipe]) -> None:
    results = rank(pork_catalog, _selection(proteins=["pork"]), 6)
    assert [r.id for r in results] == ["a", "b", "c"]


# Purpose: verify the limit bounds the result length.
def test_rank_limit(pork_catalog: list[Recipe]) -> None:
    selection = _selection(proteins=["pork"])
    assert [r.id for r in rank(pork_catalog, selection, 1)] == ["a"]
    assert rank(pork_catalog, selection, 0) == []
    assert rank(pork_catalog, selection, -3) == []
    assert rank([], selection, 6) == []


# Purpose: verify ranking leaves catalog and selection untouched.
def test_rank_does_not_mutate_inputs(pork_catalog: list[Recipe]) -> None:
    selection = _selection(proteins=["pork"])
    rank(pork_catalog, selection, 6)
    assert all(r.match_percentage is None for r in pork_catalog)
    assert selection.total_selected == 1


def test_percentage_rounds_half_up() -> None:
    assert percentage(1, 3) == 33
    assert percentage(2, 3) == 67
    assert percentage(1, 8) == 13
    assert percentage(3, 0) == 0
    assert percentage(5, 4) == 100


def test_score_recipe_counts_every_category() -> None:
    recipe = Recipe(
        id="x",
        title="Stir Fry",
        protein_tags=["tofu"],
        veggie_tags=["onion"],
        pantry_tags=["soy-sauce"],
        required_cookware=["wok"],
    )
    selection = _selection(proteins=["tofu"], veggies=["onion", "carrot"], pantry=["soy sauce"], cookware=["wok"])
    # soy sauce normalizes to a different tag than soy-sauce
    assert score_recipe(recipe, selection) == 60
    assert score_recipe(recipe, Selection()) == 0


def test_match_breakdown(pork_catalog: list[Recipe]) -> None:
    selection = _selection(proteins=["pork"], herbs=["garlic", "thyme"])
    entries = {entry.category: entry for entry in match_breakdown(pork_catalog[0], selection)}
    assert entries[SelectionCategory.PROTEINS].matched == ("pork",)
    assert entries[SelectionCategory.GRAINS_AND_SPICES].matched == ("garlic",)
    assert entries[SelectionCategory.GRAINS_AND_SPICES].selected == 2
    assert entries[SelectionCategory.COOKWARE].matched == ()


def test_rank_empty_selection_five_recipes() -> None:
    catalog = [Recipe(id=str(i), title=f"Dish {i}", protein_tags=["pork"]) for i in range(5)]
    results = rank(catalog, Selection(), 6)
    assert [r.id for r in results] == ["0", "1", "2", "3", "4"]
    assert all(r.match_percentage == 0 for r in results)


def test_rank_is_idempotent(pork_catalog: list[Recipe]) -> None:
    selection = _selection(proteins=["pork", "tofu"], pantry=["salt"])
    first = rank(pork_catalog, selection, 6)
    assert rank(pork_catalog, selection, 6) == first
    assert all(0 <= r.match_percentage <= 100 for r in first)


def test_rank_copies_keep_recipe_fields() -> None:
    catalog = [
        Recipe(id="h", title="Braise", protein_tags=["pork"], difficulty="hard", cooking_time=90),
        Recipe(id="e", title="Salad", protein_tags=["pork"], difficulty="easy"),
    ]
    results = rank(catalog, _selection(proteins=["pork"]), 6)
    assert [r.difficulty for r in results] == [Difficulty.HARD, Difficulty.EASY]
    assert results[0].cooking_time == 90
