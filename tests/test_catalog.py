from __future__ import annotations

import logging
from pathlib import Path

import pytest

from recipematch.catalog import (
    find_recipe,
    load_catalog,
    load_csv_recipes,
    load_vault_recipes,
    parse_recipe_markdown,
    recipes_from_rows,
)
from recipematch.config import EffectiveConfig
from recipematch.domain import Difficulty
from recipematch.errors import CatalogError, MissingFileError, RecipeParseError


def _cfg(catalog_path: Path) -> EffectiveConfig:
    return EffectiveConfig(
        catalog_path=str(catalog_path),
        recipes_dir="Recipes",
        default_project=None,
        project_dir=str(catalog_path),
    )


def test_load_vault_recipes(example_vault: Path) -> None:
    recipes = load_vault_recipes(example_vault / "Recipes")
    assert [r.id for r in recipes] == ["1", "2", "3", "4"]

    chops = recipes[0]
    assert chops.herb_tags == ("rosemary", "garlic")
    assert chops.ingredients == ("2 pork chops", "3 cloves garlic", "1 sprig rosemary")
    assert chops.steps[0] == "Season pork chops."


def test_load_vault_recipes_mixed_tag_shapes(example_vault: Path) -> None:
    recipes = {r.id: r for r in load_vault_recipes(example_vault / "Recipes")}
    belly = recipes["3"]
    assert belly.protein_tags == ("pork",)
    assert belly.herb_tags == ("garlic", "ginger")
    assert belly.pantry_tags == ("gochujang", "soy-sauce", "brown-sugar", "sesame-oil")
    assert belly.difficulty is Difficulty.HARD


def test_load_vault_recipes_warns_on_skipped(example_vault: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="recipematch")
    load_vault_recipes(example_vault / "Recipes")
    assert "missing YAML frontmatter" in caplog.text
    assert "Untitled.md" in caplog.text


def test_load_csv_recipes(example_csv: Path) -> None:
    recipes = {r.id: r for r in load_csv_recipes(example_csv)}
    assert sorted(recipes) == ["1", "2", "3", "4", "5"]

    assert recipes["1"].ingredients == ("pork-chop", "garlic")
    assert recipes["1"].prep_time == 5
    assert recipes["1"].image_url == "/images/recipes/porkchop.jpg"
    assert recipes["3"].cooking_time == 150
    assert recipes["3"].veggie_tags == ("onion", "bell-pepper", "tomatoes")
    assert recipes["4"].protein_tags == ()
    assert recipes["5"].ingredients == ("not-json",)
    assert recipes["5"].required_cookware == ("skillet", "tongs")


def test_load_csv_recipes_missing(tmp_path: Path) -> None:
    with pytest.raises(CatalogError):
        load_csv_recipes(tmp_path / "missing.csv")


def test_load_catalog_vault_and_table(example_vault: Path, example_csv: Path) -> None:
    assert len(load_catalog(_cfg(example_vault))) == 4
    assert len(load_catalog(_cfg(example_csv))) == 5


def test_load_catalog_missing(tmp_path: Path) -> None:
    with pytest.raises(MissingFileError):
        load_catalog(_cfg(tmp_path / "nope"))
    with pytest.raises(MissingFileError):
        load_catalog(_cfg(tmp_path))


def test_parse_recipe_markdown_prefers_frontmatter_steps() -> None:
    md = "---\nid: '9'\ntitle: Toast\nsteps: [Slice, Toast]\n---\n## Method\n1. Ignored\n"
    recipe = parse_recipe_markdown(md, "Toast.md")
    assert recipe.steps == ("Slice", "Toast")


def test_parse_recipe_markdown_instructions_section() -> None:
    md = "---\nid: '9'\ntitle: Toast\n---\n## Instructions\n- Slice\n- Toast\n"
    assert parse_recipe_markdown(md, "Toast.md").steps == ("Slice", "Toast")


def test_parse_recipe_markdown_without_frontmatter() -> None:
    with pytest.raises(RecipeParseError):
        parse_recipe_markdown("# Toast\n", "Toast.md")


def test_recipes_from_rows_keeps_first_duplicate(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="recipematch")
    recipes = recipes_from_rows([{"id": "1", "title": "A"}, {"id": "1", "title": "B"}], "rows")
    assert [r.title for r in recipes] == ["A"]
    assert "duplicate" in caplog.text


def test_find_recipe(example_csv: Path) -> None:
    catalog = load_csv_recipes(example_csv)
    assert find_recipe(catalog, " 2 ").title == "Italian Porchetta"
    with pytest.raises(CatalogError):
        find_recipe(catalog, "404")


def test_load_csv_recipes_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_csv_recipes(path)
