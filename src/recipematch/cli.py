from __future__ import annotations

import argparse
from datetime import date
import json
import os
import random
import sys
from collections.abc import Callable
from typing import Any, Sequence

from .catalog import find_recipe, load_catalog
from .config import EffectiveConfig, config_to_toml, resolve_config
from .domain import Recipe, Selection, SelectionCategory
from .errors import CatalogError, ConfigError, MissingFileError, RecipematchError
from .listing import list_recipes, summarize
from .logging_utils import init_logging
from .matching import match_breakdown, rank
from .sampling import featured_recipe, random_recommendations
from .similarity import find_similar


SELECTION_OPTIONS = (
    ("protein", SelectionCategory.PROTEINS),
    ("veggie", SelectionCategory.VEGETABLES),
    ("herb", SelectionCategory.GRAINS_AND_SPICES),
    ("pantry", SelectionCategory.PANTRY),
    ("cookware", SelectionCategory.COOKWARE),
)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    init_logging(getattr(args, "verbose", False))

    if args.tui or not args.command:
        return _cmd_tui(args)

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "match": _cmd_match,
        "similar": _cmd_similar,
        "suggest": _cmd_suggest,
        "featured": _cmd_featured,
        "list": _cmd_list,
        "init": _cmd_init,
        "config": _cmd_config,
    }

    handler = handlers.get(args.command)
    if handler is None:  # pragma: no cover
        return 1  # pragma: no cover

    try:
        return handler(args)
    except RecipematchError as exc:
        print(str(exc), file=sys.stderr)
        return _exit_code(exc)
    except FileExistsError as exc:
        print(str(exc), file=sys.stderr)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--catalog", dest="catalog_path")
    common.add_argument("--recipes-dir")
    common.add_argument("--project")
    common.add_argument("--profile")
    common.add_argument("--tui-header-icon")
    common.add_argument("--tui-layout")
    common.add_argument("--tui-density")
    common.add_argument("--verbose", action="store_true")

    parser = argparse.ArgumentParser(prog="recipematch", parents=[common])
    parser.add_argument("--tui", action="store_true", help="Launch interactive TUI")
    sub = parser.add_subparsers(dest="command")

    match = sub.add_parser("match", parents=[common])
    for option, category in SELECTION_OPTIONS:
        match.add_argument(f"--{option}", action="append", default=[], help=f"Selected {category.label.lower()}")
    match.add_argument("--limit", type=int)
    match.add_argument("--json", action="store_true")
    match.add_argument("--explain", action="store_true")

    similar = sub.add_parser("similar", parents=[common])
    similar.add_argument("recipe_id")
    similar.add_argument("--count", type=int)
    similar.add_argument("--prefer", action="append", default=None)
    similar.add_argument("--json", action="store_true")

    suggest = sub.add_parser("suggest", parents=[common])
    suggest.add_argument("--count", type=int)
    suggest.add_argument("--prefer", action="append", default=None)
    suggest.add_argument("--seed", type=int)
    suggest.add_argument("--json", action="store_true")

    featured = sub.add_parser("featured", parents=[common])
    featured.add_argument("--date", dest="day", type=_parse_date)
    featured.add_argument("--prefer", action="append", default=None)
    featured.add_argument("--json", action="store_true")

    listing = sub.add_parser("list", parents=[common])
    listing.add_argument("--tag")
    listing.add_argument("--cuisine")
    listing.add_argument("--json", action="store_true")

    init = sub.add_parser("init")
    init.add_argument("path", nargs="?", default=".")
    init.add_argument("--force", action="store_true")

    sub.add_parser("config", parents=[common])

    return parser


def _cmd_match(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    catalog = load_catalog(cfg)
    selection = Selection()
    for option, category in SELECTION_OPTIONS:
        for item in getattr(args, option) or ():
            selection.add(category, item)

    limit = args.limit if args.limit is not None else cfg.match_limit
    results = rank(catalog, selection, limit)
    if args.json:
        payload = [summarize(recipe) for recipe in results]
        if args.explain:
            for entry, recipe in zip(payload, results):
                entry["matched"] = _explain(recipe, selection)
        print(json.dumps(payload, indent=2))
        return 0

    for recipe in results:
        print(f"{recipe.match_percentage:>3}%  {recipe.id}: {recipe.title}")
        if args.explain:
            for category, items in _explain(recipe, selection).items():
                print(f"      {category}: {', '.join(items)}")
    return 0


def _cmd_similar(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    catalog = load_catalog(cfg)
    reference = find_recipe(catalog, args.recipe_id)
    count = args.count if args.count is not None else cfg.similar_count
    results = find_similar(
        reference,
        catalog,
        count,
        _preferred(args, cfg),
        weights=cfg.similarity,
    )
    _print_recipes(results, args.json)
    return 0


def _cmd_suggest(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    catalog = load_catalog(cfg)
    count = args.count if args.count is not None else cfg.sample_count
    seed = args.seed if args.seed is not None else cfg.seed
    results = random_recommendations(
        catalog,
        count,
        _preferred(args, cfg),
        rng=random.Random(seed),
        preferred_weight=cfg.sampling.preferred_weight,
    )
    _print_recipes(results, args.json)
    return 0


def _cmd_featured(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    catalog = load_catalog(cfg)
    recipe = featured_recipe(catalog, _preferred(args, cfg), day=args.day)
    if recipe is None:
        raise CatalogError("Catalog is empty")
    _print_recipes([recipe], args.json)
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    recipes = list_recipes(load_catalog(cfg), args.tag, args.cuisine)
    if args.json:
        print(json.dumps(recipes, indent=2))
    else:
        for rec in recipes:
            print(f"{rec.get('id')}: {rec.get('title')}")
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    root = os.path.abspath(args.path)
    os.makedirs(root, exist_ok=True)
    _ensure_dir(root, "Recipes")
    config_path = os.path.join(root, "recipematch.toml")
    if os.path.exists(config_path) and not args.force:
        raise ConfigError(f"{config_path} already exists (use --force to overwrite)")
    with open(config_path, "w", encoding="utf-8") as fh:
        fh.write(
            """catalog_path = \".\"\nrecipes_dir = \"Recipes\"\nmatch_limit = 6\n# preferred_cuisines = [\"Italian\"]\n\n[similarity]\n# protein = 3.0\n# same_cuisine = 5.0\n\n[sampling]\n# preferred_weight = 3.0\n"""
        )
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    print(config_to_toml(cfg))
    return 0


def _cmd_tui(args: argparse.Namespace) -> int:
    from .tui import run_tui

    return run_tui(_cli_args_dict(args))


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    return resolve_config(_cli_args_dict(args))


def _preferred(args: argparse.Namespace, cfg: EffectiveConfig) -> Sequence[str]:
    prefer = getattr(args, "prefer", None)
    if prefer:
        return prefer
    return cfg.preferred_cuisines


def _explain(recipe: Recipe, selection: Selection) -> dict[str, list[str]]:
    return {
        entry.category.value: list(entry.matched)
        for entry in match_breakdown(recipe, selection)
        if entry.matched
    }


def _print_recipes(recipes: list[Recipe], as_json: bool) -> None:
    if as_json:
        print(json.dumps([summarize(recipe) for recipe in recipes], indent=2))
        return
    for recipe in recipes:
        cuisine = f" [{recipe.cuisine}]" if recipe.cuisine else ""
        print(f"{recipe.id}: {recipe.title}{cuisine}")


def _parse_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {text!r} (expected YYYY-MM-DD)") from exc


def _ensure_dir(root: str, name: str) -> None:
    path = os.path.join(root, name)
    os.makedirs(path, exist_ok=True)


def _cli_args_dict(args: argparse.Namespace) -> dict[str, Any]:
    return vars(args).copy()


def _exit_code(exc: RecipematchError) -> int:
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, MissingFileError):
        return 3
    if isinstance(exc, CatalogError):
        return 4
    return 1
