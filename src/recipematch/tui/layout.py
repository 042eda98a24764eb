from __future__ import annotations

LAYOUT_MODES = ("auto", "compact", "normal", "wide")
DENSITIES = ("cozy", "compact")

# (min width, min height, mode), checked widest first.
AUTO_BREAKPOINTS = ((140, 36, "wide"), (100, 28, "normal"))

# Card width cap and horizontal margin per resolved mode.
CARD_LIMITS: dict[str, tuple[int | None, int]] = {
    "wide": (150, 20),
    "normal": (120, 12),
    "compact": (None, 4),
}


def _choice(value: object, allowed: tuple[str, ...], default: str) -> str:
    text = str(value or "").strip().lower()
    return text if text in allowed else default


def normalize_layout_mode(mode: object) -> str:
    return _choice(mode, LAYOUT_MODES, "auto")


def normalize_density(density: object) -> str:
    return _choice(density, DENSITIES, "cozy")


def resolve_layout_mode(width: int, height: int, requested_mode: object) -> str:
    mode = normalize_layout_mode(requested_mode)
    if mode != "auto":
        return mode
    for min_width, min_height, name in AUTO_BREAKPOINTS:
        if width >= min_width and height >= min_height:
            return name
    return "compact"


def stack_panels(layout_mode: str) -> bool:
    """Compact screens put the results below the picker instead of beside it."""
    return layout_mode == "compact"


def centered_card_width(viewport_width: int, layout_mode: str) -> int:
    width = max(40, viewport_width)
    cap, margin = CARD_LIMITS.get(layout_mode, CARD_LIMITS["compact"])
    target = width - margin if cap is None else min(cap, width - margin)
    return max(36, min(target, width - 2))
