from __future__ import annotations

from .layout import centered_card_width, stack_panels
from .textual import App, Screen
from .theme import TUI_THEME_NAME, TUI_THEMES

DEFAULT_HEADER_ICON = "🍳"
LAYOUT_CLASSES = {mode: f"layout-{mode}" for mode in ("compact", "normal", "wide")}
DENSITY_CLASSES = {density: f"density-{density}" for density in ("cozy", "compact")}


def header_icon(screen: Screen) -> str:
    cfg = getattr(getattr(screen, "app", None), "cfg", None)
    icon = str(getattr(getattr(cfg, "tui", None), "header_icon", "") or "").strip()
    return icon or DEFAULT_HEADER_ICON


def use_theme(app: App, theme_name: str = TUI_THEME_NAME) -> None:
    app.register_theme(TUI_THEMES[theme_name])
    app.theme = theme_name


def apply_layout_classes(node, layout_mode: str, density: str) -> None:
    for mode, class_name in LAYOUT_CLASSES.items():
        node.set_class(mode == layout_mode, class_name)
    for value, class_name in DENSITY_CLASSES.items():
        node.set_class(value == density, class_name)


def refresh_screen_layout(screen: Screen, card_selector: str, panels_selector: str) -> None:
    app = screen.app
    mode = str(getattr(app, "tui_layout_mode", "normal"))
    apply_layout_classes(screen, mode, str(getattr(app, "tui_density", "cozy")))
    screen.query_one(panels_selector).set_class(stack_panels(mode), "stacked")

    width = screen.size.width
    if width > 0:
        screen.query_one(card_selector).styles.width = centered_card_width(width, mode)
