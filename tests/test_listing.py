from __future__ import annotations

from pathlib import Path

from recipematch.catalog import load_csv_recipes
from recipematch.domain import Recipe
from recipematch.listing import list_recipes, recipe_tags, summarize


def test_list_recipes_by_tag(example_csv: Path) -> None:
    recipes = list_recipes(load_csv_recipes(example_csv), tag="Garlic")
    assert [r["id"] for r in recipes] == ["1", "2", "3", "5"]


def test_list_recipes_by_cuisine(example_csv: Path) -> None:
    catalog = load_csv_recipes(example_csv)
    assert [r["id"] for r in list_recipes(catalog, cuisine="italian")] == ["2", "4", "5"]
    assert [r["id"] for r in list_recipes(catalog, tag="garlic", cuisine="Italian")] == ["2", "5"]


def test_list_recipes_no_filter(example_csv: Path) -> None:
    assert len(list_recipes(load_csv_recipes(example_csv))) == 5


def test_recipe_tags_dedupes() -> None:
    recipe = Recipe(id="1", title="X", protein_tags=["pork"], pantry_tags=["garlic"], herb_tags=["garlic"])
    assert recipe_tags(recipe) == ["pork", "garlic"]


def test_summarize() -> None:
    recipe = Recipe(id="1", title="X", cuisine="Thai", cooking_time=10)
    summary = summarize(recipe)
    assert summary["cuisine"] == "Thai"
    assert "match_percentage" not in summary
    assert summarize(recipe.with_match(40))["match_percentage"] == 40
