from __future__ import annotations

import json
import logging
import re
from typing import Any


logger = logging.getLogger(__name__)

PUNCT_RE = re.compile(r"[^\w\s-]")
LIST_CHARS_RE = re.compile(r"[\[\]\"']")

UNIT_WORDS = frozenset(
    {
        "cup",
        "cups",
        "tablespoon",
        "tablespoons",
        "tbsp",
        "teaspoon",
        "teaspoons",
        "tsp",
        "pound",
        "pounds",
        "lb",
        "lbs",
        "oz",
        "ounce",
        "ounces",
        "g",
        "gram",
        "grams",
        "kg",
        "kilogram",
        "kilograms",
        "ml",
        "milliliter",
        "milliliters",
        "millilitre",
        "millilitres",
        "liter",
        "liters",
        "litre",
        "litres",
        "piece",
        "pieces",
        "inch",
        "inches",
    }
)
SIZE_WORDS = frozenset({"large", "medium", "small", "fresh", "dried"})
STOP_WORDS = UNIT_WORDS | SIZE_WORDS


def normalize(label: Any) -> str:
    if not isinstance(label, str):
        logger.debug("non-string ingredient label ignored: %r", label)
        return ""
    # isnumeric also covers fractions such as "½" and other Unicode numerals.
    text = "".join(ch for ch in label.lower() if not ch.isnumeric())
    text = PUNCT_RE.sub("", text)
    words = [word for word in text.split() if word not in STOP_WORDS]
    return " ".join(words)


def coerce_tags(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        raw = _split_tag_string(value)
    elif isinstance(value, (list, tuple)):
        raw = list(value)
    elif isinstance(value, (set, frozenset)):
        raw = sorted(value, key=str)
    else:
        if value is not None:
            logger.debug("tag field of type %s treated as empty", type(value).__name__)
        return ()

    seen: set[str] = set()
    out: list[str] = []
    for item in raw:
        tag = normalize(item)
        if not tag or tag in seen:
            continue
        seen.add(tag)
        out.append(tag)
    return tuple(out)


def _split_tag_string(text: str) -> list[Any]:
    stripped = text.strip()
    if not stripped:
        return []
    if stripped.startswith("["):
        try:
            decoded = json.loads(stripped)
        except json.JSONDecodeError:
            decoded = None
        if isinstance(decoded, list):
            return decoded
    cleaned = LIST_CHARS_RE.sub("", stripped)
    return [part.strip() for part in cleaned.split(",") if part.strip()]
