from __future__ import annotations

from ..config import resolve_config
from .app import RecipematchApp


def run_tui(cli_args: dict[str, object]) -> int:
    cfg = resolve_config(cli_args)
    app = RecipematchApp(cfg)
    app.run()
    return 0


__all__ = ["run_tui", "RecipematchApp"]
