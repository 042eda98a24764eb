from __future__ import annotations

import random

from ..catalog import load_catalog
from ..config import EffectiveConfig
from ..domain import Selection
from .common import apply_layout_classes, use_theme
from .data_sources import build_vocabulary
from .layout import normalize_density, resolve_layout_mode
from .screens.match import MatchScreen
from .textual import App
from .theme import APP_CSS


class RecipematchApp(App):
    TITLE = "recipematch"
    CSS = APP_CSS
    BINDINGS = [("q", "quit", "Quit")]

    def __init__(self, cfg: EffectiveConfig) -> None:
        super().__init__(ansi_color=True)
        self.cfg = cfg
        self.tui_layout_mode = "normal"
        self.tui_density = normalize_density(cfg.tui.density)
        self.catalog = load_catalog(cfg)
        self.vocabulary = build_vocabulary(self.catalog)
        self.selection = Selection()
        self.rng = random.Random(cfg.seed)

    def on_mount(self) -> None:
        use_theme(self)
        self._refresh_layout_mode()
        self.push_screen(MatchScreen())

    def on_resize(self, event) -> None:
        self._refresh_layout_mode()

    def _refresh_layout_mode(self) -> None:
        size = getattr(self, "size", None)
        width = int(getattr(size, "width", 0) or 0)
        height = int(getattr(size, "height", 0) or 0)
        self.tui_layout_mode = resolve_layout_mode(width, height, self.cfg.tui.layout)
        apply_layout_classes(self, self.tui_layout_mode, self.tui_density)
        for screen in tuple(getattr(self, "screen_stack", ())):
            apply_layout_classes(screen, self.tui_layout_mode, self.tui_density)
