from __future__ import annotations

from ...domain import Recipe, SelectionCategory
from ...matching import rank
from ...sampling import random_recommendations
from ...similarity import find_similar
from ..common import header_icon, refresh_screen_layout
from ..data_sources import fuzzy_filter
from ..state import ItemInfo, ResultInfo
from ..textual import (
    ComposeResult,
    Footer,
    Header,
    Horizontal,
    Input,
    Label,
    ListItem,
    ListView,
    Screen,
    Static,
    Vertical,
)


class MatchScreen(Screen):
    BINDINGS = [
        ("c", "clear_selection", "Clear"),
        ("q", "app.quit", "Quit"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.category = SelectionCategory.PROTEINS
        self.search_query = ""
        self.reference: Recipe | None = None

    def compose(self) -> ComposeResult:
        yield Header(icon=header_icon(self))
        with Vertical(id="match-shell", classes="screen-shell"):
            with Vertical(id="match-card", classes="screen-card"):
                with Horizontal(id="match-lists"):
                    with Vertical(id="picker-panel"):
                        yield Label("Categories", classes="panel-title")
                        yield ListView(id="category-list")
                        yield Label("Items", id="items-title", classes="panel-title")
                        yield Input(placeholder="Search items", id="search-input")
                        yield ListView(id="item-list")
                    with Vertical(id="results-panel"):
                        yield Label("Matches", classes="panel-title")
                        yield ListView(id="result-list")
                        yield Label("You might also like", id="similar-title", classes="panel-title")
                        yield ListView(id="similar-list")
                yield Static("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_categories()
        self._refresh_items()
        self._refresh_results()
        self._refresh_layout()
        self.query_one("#category-list", ListView).focus()

    def on_resize(self, event) -> None:
        self._refresh_layout()

    def on_input_changed(self, event: Input.Changed) -> None:
        widget = getattr(event, "input", event.control)
        if widget.id == "search-input":
            self.search_query = event.value
            self._refresh_items()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        list_view = getattr(event, "list_view", event.control)
        if list_view.id == "category-list":
            self._select_category(event.item)
        elif list_view.id == "item-list":
            self._toggle_item(event.item)
        elif list_view.id == "result-list":
            self._select_reference(event.item)

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        list_view = getattr(event, "list_view", event.control)
        if list_view.id == "result-list" and event.item is not None:
            self._select_reference(event.item)

    def action_clear_selection(self) -> None:
        self.app.selection.clear()
        self.reference = None
        self._refresh_items()
        self._refresh_results()

    def _select_category(self, item: ListItem) -> None:
        category = getattr(item, "category", None)
        if category is None:
            return
        self.category = category
        self.query_one("#items-title", Label).update(category.label)
        self._refresh_items()

    def _toggle_item(self, item: ListItem) -> None:
        info = getattr(item, "info", None)
        if info is None:
            return
        self.app.selection.toggle(info.category, info.value)
        self._refresh_items()
        self._refresh_results()

    def _select_reference(self, item: ListItem) -> None:
        recipe = getattr(item, "recipe", None)
        if recipe is None or recipe == self.reference:
            return
        self.reference = recipe
        self._refresh_similar()

    def _refresh_categories(self) -> None:
        category_list = self.query_one("#category-list", ListView)
        category_list.clear()
        for category in SelectionCategory:
            count = len(self.app.selection.items(category))
            suffix = f" ({count})" if count else ""
            item = ListItem(Label(f"{category.label}{suffix}"))
            item.category = category
            category_list.append(item)

    def _refresh_items(self) -> None:
        items: list[ItemInfo] = list(self.app.vocabulary.get(self.category, []))
        if self.search_query:
            items = fuzzy_filter(items, self.search_query, lambda info: info.value)

        item_list = self.query_one("#item-list", ListView)
        item_list.clear()
        if not items:
            item_list.append(ListItem(Label("No items found")))
            return

        for info in items:
            selected = self.app.selection.contains(info.category, info.value)
            item = ListItem(Label(info.display(selected)))
            if selected:
                item.add_class("item-selected")
            item.info = info
            item_list.append(item)

    def _refresh_results(self) -> None:
        results = rank(self.app.catalog, self.app.selection, self.app.cfg.match_limit)
        result_list = self.query_one("#result-list", ListView)
        result_list.clear()
        if not results:
            result_list.append(ListItem(Label("No recipes in catalog")))
        for recipe in results:
            item = ListItem(Label(ResultInfo(recipe).display()))
            item.recipe = recipe
            result_list.append(item)

        if self.reference is not None and self.reference.id not in {r.id for r in results}:
            self.reference = None
        self._refresh_similar()
        self._refresh_status(len(results))
        self._refresh_category_counts()

    def _refresh_similar(self) -> None:
        cfg = self.app.cfg
        if self.reference is None:
            title = "Suggestions"
            recipes = random_recommendations(
                self.app.catalog,
                cfg.sample_count,
                cfg.preferred_cuisines,
                rng=self.app.rng,
                preferred_weight=cfg.sampling.preferred_weight,
            )
        else:
            title = f"Like {self.reference.title}"
            recipes = find_similar(
                self.reference,
                self.app.catalog,
                cfg.similar_count,
                cfg.preferred_cuisines,
                weights=cfg.similarity,
            )
        self.query_one("#similar-title", Label).update(title)
        similar_list = self.query_one("#similar-list", ListView)
        similar_list.clear()
        for recipe in recipes:
            similar_list.append(ListItem(Label(ResultInfo(recipe).display())))

    def _refresh_category_counts(self) -> None:
        category_list = self.query_one("#category-list", ListView)
        for item in list(category_list.children):
            category = getattr(item, "category", None)
            if category is None:
                continue
            count = len(self.app.selection.items(category))
            suffix = f" ({count})" if count else ""
            item.query_one(Label).update(f"{category.label}{suffix}")

    def _refresh_status(self, shown: int) -> None:
        selection = self.app.selection
        status = self.query_one("#status", Static)
        status.update(
            f"{selection.total_selected} selected · showing {shown} of {len(self.app.catalog)} recipes"
            " · enter toggles · c clears"
        )

    def _refresh_layout(self) -> None:
        refresh_screen_layout(self, "#match-card", "#match-lists")
