from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Sequence

import pandas as pd

from .config import EffectiveConfig
from .domain import Recipe, list_items, split_frontmatter
from .errors import CatalogError, MissingFileError, RecipeParseError
from .paths import resolve_catalog_paths


logger = logging.getLogger(__name__)

STEP_SECTIONS = ("Method", "Steps", "Instructions")


def load_catalog(cfg: EffectiveConfig) -> list[Recipe]:
    paths = resolve_catalog_paths(cfg)
    if not paths.catalog_root.exists():
        raise MissingFileError(f"Catalog not found: {paths.catalog_root}")
    if paths.is_table:
        return load_csv_recipes(paths.catalog_root)
    if not paths.recipes_dir.is_dir():
        raise MissingFileError(f"Recipes directory not found: {paths.recipes_dir}")
    return load_vault_recipes(paths.recipes_dir)


def load_vault_recipes(recipes_dir: Path) -> list[Recipe]:
    recipes: list[Recipe] = []
    for path in sorted(recipes_dir.rglob("*.md")):
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("skipping unreadable recipe %s: %s", path, exc)
            continue
        try:
            recipes.append(parse_recipe_markdown(text, str(path)))
        except RecipeParseError as exc:
            logger.warning("skipping recipe: %s", exc)
    return _dedupe(recipes)


def parse_recipe_markdown(md: str, source_path: str) -> Recipe:
    doc = split_frontmatter(md)
    if not doc.frontmatter:
        raise RecipeParseError(f"{source_path}: missing YAML frontmatter")

    data: dict[str, Any] = dict(doc.frontmatter)
    if not data.get("ingredients"):
        data["ingredients"] = list_items(doc.section("Ingredients"))
    if not data.get("steps") and not data.get("instructions"):
        data["steps"] = list_items(doc.section(*STEP_SECTIONS))
    return Recipe.from_mapping(data, source_path)


def load_csv_recipes(path: Path) -> list[Recipe]:
    # Every cell stays a string; blanks are "" rather than NaN.
    try:
        frame = pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Failed to read catalog: {path}") from exc
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise CatalogError(f"Invalid CSV in catalog: {path}") from exc

    return recipes_from_rows(frame.to_dict(orient="records"), str(path))


def recipes_from_rows(rows: Iterable[dict[str, Any]], source: str) -> list[Recipe]:
    recipes: list[Recipe] = []
    for line_number, row in enumerate(rows, start=2):
        try:
            recipes.append(Recipe.from_mapping(row, f"{source}:{line_number}"))
        except RecipeParseError as exc:
            logger.warning("skipping row: %s", exc)
    return _dedupe(recipes)


def find_recipe(catalog: Sequence[Recipe], recipe_id: str) -> Recipe:
    key = str(recipe_id).strip()
    for recipe in catalog:
        if recipe.id == key:
            return recipe
    raise CatalogError(f"Recipe {recipe_id!r} not found in catalog")


def _dedupe(recipes: list[Recipe]) -> list[Recipe]:
    seen: set[str] = set()
    out: list[Recipe] = []
    for recipe in recipes:
        if recipe.id in seen:
            logger.warning("skipping duplicate recipe id %r (%s)", recipe.id, recipe.title)
            continue
        seen.add(recipe.id)
        out.append(recipe)
    return out
