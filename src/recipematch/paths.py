from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import EffectiveConfig


@dataclass(frozen=True)
class CatalogPaths:
    catalog_root: Path
    recipes_dir: Path
    is_table: bool


def resolve_catalog_paths(cfg: EffectiveConfig) -> CatalogPaths:
    root = Path(cfg.catalog_path)
    is_table = root.suffix.lower() == ".csv"
    return CatalogPaths(
        catalog_root=root,
        recipes_dir=root if is_table else root / cfg.recipes_dir,
        is_table=is_table,
    )
