from __future__ import annotations

from .textual import Theme

TUI_THEME_NAME = "recipematch-ansi"

APP_CSS = """
Screen {
    background: $background;
    color: $text;
    padding: 0;
}

Header, Footer {
    background: $panel;
    color: $text;
}

.screen-shell {
    width: 1fr;
    height: 1fr;
    align: center top;
    padding: 1 2;
}

.layout-wide .screen-shell {
    padding: 1 4;
}

.layout-compact .screen-shell {
    padding: 0 1;
}

.screen-card {
    width: 1fr;
    height: 1fr;
    border: round $panel;
    background: $surface;
    padding: 1 2;
}

.layout-compact .screen-card,
.density-compact .screen-card {
    padding: 0 1;
}

#match-lists {
    height: 1fr;
}

#picker-panel {
    width: 2fr;
    height: 1fr;
}

#results-panel {
    width: 3fr;
    height: 1fr;
}

#category-list {
    height: 7;
    border: round $panel;
    background: $surface;
}

#item-list, #result-list, #similar-list {
    height: 1fr;
    border: round $panel;
    background: $surface;
}

#category-list:focus,
#item-list:focus,
#result-list:focus,
#similar-list:focus {
    border: round $primary;
}

ListView > ListItem.--highlight,
ListView > ListItem.-highlight {
    background: $panel;
    color: $text;
    text-style: bold;
}

ListView:focus > ListItem.--highlight,
ListView:focus > ListItem.-highlight {
    background: ansi_bright_yellow;
    color: ansi_black;
    text-style: bold;
}

ListView > ListItem.item-selected {
    background: ansi_bright_cyan;
    color: ansi_black;
    text-style: bold;
}

.panel-title {
    text-style: bold;
    padding: 1 0 0 0;
}

#search-input {
    margin: 0 0 1 0;
    background: $surface;
    border: round $panel;
    color: $text;
}

#status {
    height: auto;
    padding: 1 0 0 0;
    color: $text-muted;
}

#match-lists.stacked {
    layout: vertical;
}

#match-lists.stacked #picker-panel,
#match-lists.stacked #results-panel {
    width: 1fr;
}

.layout-compact #category-list {
    height: 5;
}
"""

TUI_THEMES = {
    TUI_THEME_NAME: Theme(
        name=TUI_THEME_NAME,
        primary="ansi_bright_green",
        secondary="ansi_bright_blue",
        accent="ansi_bright_yellow",
        warning="ansi_bright_yellow",
        error="ansi_bright_red",
        success="ansi_bright_green",
        foreground="ansi_default",
        background="ansi_default",
        surface="ansi_default",
        panel="ansi_bright_black",
        dark=False,
        variables={
            "text": "ansi_default",
            "text-muted": "ansi_bright_black",
        },
    )
}
