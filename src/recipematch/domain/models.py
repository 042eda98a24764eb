from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from enum import Enum
import json
import re
from typing import Any, Iterable, Mapping, Optional

from ..errors import RecipeParseError
from ..tags import coerce_tags, normalize


LEADING_INT_RE = re.compile(r"^\s*(\d+)")


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def coerce(cls, value: Any) -> "Difficulty":
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value == text:
                return member
        return cls.MEDIUM


TAG_FIELDS = ("protein_tags", "veggie_tags", "herb_tags", "pantry_tags", "required_cookware")


@dataclass(frozen=True)
class Recipe:
    id: str
    title: str
    description: str = ""
    image_url: str = ""
    cooking_time: int = 0
    servings: int = 0
    difficulty: Difficulty = Difficulty.MEDIUM
    cuisine: Optional[str] = None
    protein_tags: tuple[str, ...] = ()
    veggie_tags: tuple[str, ...] = ()
    herb_tags: tuple[str, ...] = ()
    pantry_tags: tuple[str, ...] = ()
    required_cookware: tuple[str, ...] = ()
    prep_time: Optional[int] = None
    ingredients: tuple[str, ...] = ()
    steps: tuple[str, ...] = ()
    match_percentage: Optional[int] = None

    def __post_init__(self) -> None:
        # Tag fields accept any shape here and are frozen to normalized tuples.
        for name in TAG_FIELDS:
            object.__setattr__(self, name, coerce_tags(getattr(self, name)))
        object.__setattr__(self, "difficulty", Difficulty.coerce(self.difficulty))
        object.__setattr__(self, "ingredients", _text_tuple(self.ingredients))
        object.__setattr__(self, "steps", _text_tuple(self.steps))
        cuisine = str(self.cuisine).strip() if self.cuisine is not None else ""
        object.__setattr__(self, "cuisine", cuisine or None)

    def tag_set(self, name: str) -> frozenset[str]:
        return frozenset(getattr(self, name))

    def with_match(self, percentage: int) -> "Recipe":
        return replace(self, match_percentage=percentage)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["difficulty"] = self.difficulty.value
        for key, value in data.items():
            if isinstance(value, tuple):
                data[key] = list(value)
        if self.match_percentage is None:
            data.pop("match_percentage")
        return data

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], source: str = "<mapping>") -> "Recipe":
        recipe_id = _first(data, "id", "recipe_id")
        title = _first(data, "title", "name")
        if recipe_id in (None, "") or title in (None, ""):
            raise RecipeParseError(f"{source}: recipe is missing 'id' or 'title'")

        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {
            "id": str(recipe_id).strip(),
            "title": str(title).strip(),
            "description": str(data.get("description") or ""),
            "image_url": str(_first(data, "image_url", "image") or ""),
            "cooking_time": _int_value(_first(data, "cooking_time", "cook_time")),
            "servings": _int_value(data.get("servings")),
            "difficulty": data.get("difficulty"),
            "cuisine": _first(data, "cuisine", "cuisine_type"),
            "prep_time": _optional_int(data.get("prep_time")),
            "ingredients": coerce_text_list(data.get("ingredients")),
            "steps": coerce_text_list(_first(data, "steps", "instructions")),
        }
        for name in TAG_FIELDS:
            values[name] = data.get(name)
        if not values["required_cookware"]:
            values["required_cookware"] = data.get("cookware")
        return cls(**{key: value for key, value in values.items() if key in known})


# Derived results are Recipe copies with match_percentage set.
MatchResult = Recipe


class SelectionCategory(str, Enum):
    PROTEINS = "proteins"
    VEGETABLES = "vegetables"
    GRAINS_AND_SPICES = "grains_and_spices"
    PANTRY = "pantry"
    COOKWARE = "cookware"

    @property
    def tag_field(self) -> str:
        return _CATEGORY_TAG_FIELDS[self]

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @classmethod
    def parse(cls, name: str) -> "SelectionCategory":
        key = str(name or "").strip().lower().replace("-", "_")
        key = _CATEGORY_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError as exc:
            raise ValueError(f"Unknown selection category: {name!r}") from exc


_CATEGORY_TAG_FIELDS = {
    SelectionCategory.PROTEINS: "protein_tags",
    SelectionCategory.VEGETABLES: "veggie_tags",
    SelectionCategory.GRAINS_AND_SPICES: "herb_tags",
    SelectionCategory.PANTRY: "pantry_tags",
    SelectionCategory.COOKWARE: "required_cookware",
}

_CATEGORY_LABELS = {
    SelectionCategory.PROTEINS: "Proteins",
    SelectionCategory.VEGETABLES: "Vegetables",
    SelectionCategory.GRAINS_AND_SPICES: "Herbs & Spices",
    SelectionCategory.PANTRY: "Pantry",
    SelectionCategory.COOKWARE: "Cookware",
}

_CATEGORY_ALIASES = {
    "protein": "proteins",
    "veggie": "vegetables",
    "veggies": "vegetables",
    "vegetable": "vegetables",
    "grainsandspices": "grains_and_spices",
    "herb": "grains_and_spices",
    "herbs": "grains_and_spices",
    "spices": "grains_and_spices",
    "equipment": "cookware",
}


@dataclass
class Selection:
    chosen: dict[SelectionCategory, set[str]] = field(
        default_factory=lambda: {category: set() for category in SelectionCategory}
    )

    def __post_init__(self) -> None:
        for category in SelectionCategory:
            self.chosen.setdefault(category, set())

    @classmethod
    def from_mapping(cls, data: Mapping[str, Iterable[str]]) -> "Selection":
        selection = cls()
        for name, items in data.items():
            category = SelectionCategory.parse(name)
            if isinstance(items, str):
                items = [items]
            for item in items or ():
                selection.add(category, item)
        return selection

    def items(self, category: SelectionCategory) -> frozenset[str]:
        return frozenset(self.chosen[category])

    def contains(self, category: SelectionCategory, item: str) -> bool:
        return normalize(item) in self.chosen[category]

    def add(self, category: SelectionCategory, item: str) -> bool:
        key = normalize(item)
        if not key:
            return False
        for other, items in self.chosen.items():
            if other is not category:
                items.discard(key)
        self.chosen[category].add(key)
        return True

    def discard(self, category: SelectionCategory, item: str) -> None:
        self.chosen[category].discard(normalize(item))

    def toggle(self, category: SelectionCategory, item: str) -> bool:
        if self.contains(category, item):
            self.discard(category, item)
            return False
        return self.add(category, item)

    def clear(self) -> None:
        for items in self.chosen.values():
            items.clear()

    @property
    def total_selected(self) -> int:
        return sum(len(items) for items in self.chosen.values())

    @property
    def is_empty(self) -> bool:
        return self.total_selected == 0

    def snapshot(self) -> "Selection":
        return Selection({category: set(items) for category, items in self.chosen.items()})

    def to_dict(self) -> dict[str, list[str]]:
        return {category.value: sorted(self.chosen[category]) for category in SelectionCategory}


def coerce_text_list(value: Any) -> list[str]:
    if isinstance(value, (list, tuple)):
        out: list[str] = []
        for item in value:
            if isinstance(item, Mapping):
                item = item.get("name", "")
            text = str(item).strip()
            if text:
                out.append(text)
        return out
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return []
        if text.startswith("["):
            try:
                decoded = json.loads(text)
            except json.JSONDecodeError:
                decoded = None
            if isinstance(decoded, list):
                return coerce_text_list(decoded)
        return [text]
    return []


def _text_tuple(value: Any) -> tuple[str, ...]:
    return tuple(coerce_text_list(value))


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = data.get(key)
        if value not in (None, ""):
            return value
    return None


def _int_value(value: Any) -> int:
    parsed = _optional_int(value)
    return 0 if parsed is None else parsed


def _optional_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    match = LEADING_INT_RE.match(str(value))
    if not match:
        return None
    return int(match.group(1))
