from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import json
import os
import tomllib
from typing import Any, Optional

from .errors import ConfigError
from .sampling import DEFAULT_PREFERRED_WEIGHT
from .similarity import SimilarityWeights


@dataclass(frozen=True)
class SamplingConfig:
    preferred_weight: float = DEFAULT_PREFERRED_WEIGHT


@dataclass(frozen=True)
class TuiConfig:
    header_icon: str = "🍳"
    layout: str = "auto"
    density: str = "cozy"


@dataclass(frozen=True)
class EffectiveConfig:
    catalog_path: str
    recipes_dir: str
    default_project: Optional[str]
    project_dir: str
    match_limit: int = 6
    similar_count: int = 3
    sample_count: int = 3
    preferred_cuisines: tuple[str, ...] = ()
    seed: Optional[int] = None
    similarity: SimilarityWeights = field(default_factory=SimilarityWeights)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    tui: TuiConfig = field(default_factory=TuiConfig)


def _config_root() -> Path:
    return Path(os.path.expanduser("~/.config/recipematch"))


def load_global_config() -> dict[str, Any]:
    path = _config_root() / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def load_profile(profile: str) -> Optional[str]:
    path = _config_root() / "projects.d" / f"{profile}.toml"
    if not path.exists():
        return None
    data = _load_toml(path)
    project = data.get("project")
    if not project:
        raise ConfigError(f"Profile {profile!r} missing 'project' key")
    return str(project)


def load_project_config(project_dir: str) -> dict[str, Any]:
    path = Path(project_dir) / "recipematch.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(cli: dict[str, Any], project: dict[str, Any], global_cfg: dict[str, Any]) -> dict[str, Any]:
    merged = _deep_merge(global_cfg, project)
    return _deep_merge(merged, cli)


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    global_cfg = load_global_config()
    profile = cli_args.get("profile")
    project_dir = cli_args.get("project")
    if not project_dir and profile:
        project_dir = load_profile(profile)
    if not project_dir:
        project_dir = global_cfg.get("default_project") or os.getcwd()

    project_cfg = load_project_config(project_dir)

    cli_cfg = _cli_to_dict(cli_args)
    merged = merge_config(cli_cfg, project_cfg, global_cfg)

    catalog_path = merged.get("catalog_path")
    if not catalog_path:
        raise ConfigError("catalog_path is required (set in config or via --catalog)")
    catalog = Path(os.path.expanduser(str(catalog_path)))
    if not catalog.is_absolute():
        catalog = Path(project_dir) / catalog

    similarity_cfg = _table(merged, "similarity")
    sampling_cfg = _table(merged, "sampling")
    defaults = SimilarityWeights()

    return EffectiveConfig(
        catalog_path=str(catalog),
        recipes_dir=str(merged.get("recipes_dir", "Recipes")),
        default_project=merged.get("default_project"),
        project_dir=str(project_dir),
        match_limit=_positive_int(merged, "match_limit", 6),
        similar_count=_positive_int(merged, "similar_count", 3),
        sample_count=_positive_int(merged, "sample_count", 3),
        preferred_cuisines=_string_list(merged.get("preferred_cuisines")),
        seed=_optional_int(merged.get("seed"), "seed"),
        similarity=SimilarityWeights(
            protein=_weight(similarity_cfg, "protein", defaults.protein),
            veggie=_weight(similarity_cfg, "veggie", defaults.veggie),
            herb=_weight(similarity_cfg, "herb", defaults.herb),
            cookware=_weight(similarity_cfg, "cookware", defaults.cookware),
            same_cuisine=_weight(similarity_cfg, "same_cuisine", defaults.same_cuisine),
            preferred_cuisine=_weight(similarity_cfg, "preferred_cuisine", defaults.preferred_cuisine),
        ),
        sampling=SamplingConfig(
            preferred_weight=_preference_weight(sampling_cfg),
        ),
        tui=TuiConfig(
            header_icon=str(merged.get("tui_header_icon", "🍳")),
            layout=_normalize_choice(merged.get("tui_layout"), {"auto", "compact", "normal", "wide"}, "auto"),
            density=_normalize_choice(merged.get("tui_density"), {"cozy", "compact"}, "cozy"),
        ),
    )


def _cli_to_dict(cli_args: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in ("catalog_path", "recipes_dir", "default_project"):
        if cli_args.get(key) is not None:
            out[key] = cli_args[key]

    for key in ("tui_header_icon", "tui_layout", "tui_density"):
        if cli_args.get(key) is not None:
            out[key] = cli_args[key]

    return out


def config_to_toml(cfg: EffectiveConfig) -> str:
    lines = [
        f"catalog_path = {_toml_str(cfg.catalog_path)}",
        f"recipes_dir = {_toml_str(cfg.recipes_dir)}",
    ]
    if cfg.default_project:
        lines.append(f"default_project = {_toml_str(cfg.default_project)}")
    lines.append(f"match_limit = {cfg.match_limit}")
    lines.append(f"similar_count = {cfg.similar_count}")
    lines.append(f"sample_count = {cfg.sample_count}")
    cuisines = ", ".join(_toml_str(c) for c in cfg.preferred_cuisines)
    lines.append(f"preferred_cuisines = [{cuisines}]")
    if cfg.seed is not None:
        lines.append(f"seed = {cfg.seed}")
    lines.append(f"tui_header_icon = {_toml_str(cfg.tui.header_icon)}")
    lines.append(f"tui_layout = {_toml_str(cfg.tui.layout)}")
    lines.append(f"tui_density = {_toml_str(cfg.tui.density)}")
    lines.append("")
    lines.append("[similarity]")
    lines.append(f"protein = {cfg.similarity.protein!r}")
    lines.append(f"veggie = {cfg.similarity.veggie!r}")
    lines.append(f"herb = {cfg.similarity.herb!r}")
    lines.append(f"cookware = {cfg.similarity.cookware!r}")
    lines.append(f"same_cuisine = {cfg.similarity.same_cuisine!r}")
    lines.append(f"preferred_cuisine = {cfg.similarity.preferred_cuisine!r}")
    lines.append("")
    lines.append("[sampling]")
    lines.append(f"preferred_weight = {cfg.sampling.preferred_weight!r}")
    return "\n".join(lines) + "\n"


def _toml_str(value: str) -> str:
    # JSON string escapes are valid TOML basic-string escapes; TOML also bans a raw DEL.
    return json.dumps(value, ensure_ascii=False).replace("\x7f", "\\u007f")


def _table(merged: dict[str, Any], key: str) -> dict[str, Any]:
    value = merged.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table")
    return value


def _positive_int(merged: dict[str, Any], key: str, default: int) -> int:
    value = merged.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"{key} must be a positive integer, got {value!r}")
    return value


def _optional_int(value: Any, key: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    return value


def _weight(table: dict[str, Any], key: str, default: float) -> float:
    value = table.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise ConfigError(f"{key} weight must be a non-negative number, got {value!r}")
    return float(value)


def _preference_weight(table: dict[str, Any]) -> float:
    value = _weight(table, "preferred_weight", DEFAULT_PREFERRED_WEIGHT)
    if value <= 1:
        raise ConfigError(f"preferred_weight must be greater than 1 so preferred cuisines win, got {value!r}")
    return value


def _string_list(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise ConfigError("preferred_cuisines must be a list of strings")
    return tuple(str(item).strip() for item in value if str(item).strip())


def _normalize_choice(value: Any, allowed: set[str], default: str) -> str:
    text = str(value or "").strip().lower()
    if text in allowed:
        return text
    return default
