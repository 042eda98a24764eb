from __future__ import annotations

from dataclasses import dataclass

from ..domain import Recipe, SelectionCategory


@dataclass(frozen=True)
class ItemInfo:
    category: SelectionCategory
    value: str
    recipe_count: int

    def display(self, selected: bool) -> str:
        marker = "[x]" if selected else "[ ]"
        return f"{marker} {self.value} ({self.recipe_count})"


@dataclass(frozen=True)
class ResultInfo:
    recipe: Recipe

    def display(self) -> str:
        pct = self.recipe.match_percentage
        score = f"{pct:>3}%" if pct is not None else "    "
        cuisine = f" · {self.recipe.cuisine}" if self.recipe.cuisine else ""
        return f"{score}  {self.recipe.title}{cuisine} · {self.recipe.cooking_time} min"
