from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Any

import yaml


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r"^\ufeff?\s*---\r?\n(.*?)\r?\n---\r?\n?", re.DOTALL)
HEADING_RE = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")
# Bullets, numbered steps and task checkboxes ("- [ ] 2 eggs").
LIST_ITEM_RE = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+(?:\[[ xX]\]\s+)?(.*\S)\s*$")


@dataclass(frozen=True)
class MarkdownDocument:
    frontmatter: dict[str, Any]
    body: str

    def section(self, *names: str, level: int = 2) -> str:
        """Text of the first heading matching any of ``names``, ignoring case."""
        sections = {name.casefold(): text for name, text in extract_sections(self.body, level).items()}
        for name in names:
            text = sections.get(name.casefold())
            if text:
                return text
        return ""


def split_frontmatter(md: str) -> MarkdownDocument:
    match = FRONTMATTER_RE.match(md)
    if not match:
        return MarkdownDocument(frontmatter={}, body=md)

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        logger.debug("unreadable front matter: %s", exc)
        data = None

    return MarkdownDocument(
        frontmatter=data if isinstance(data, dict) else {},
        body=md[match.end() :],
    )


def extract_sections(md: str, heading_level: int = 2) -> dict[str, str]:
    sections: dict[str, list[str]] = {}
    current: str | None = None

    for line in md.splitlines():
        heading = HEADING_RE.match(line)
        if heading and len(heading.group(1)) <= heading_level:
            # A shallower heading closes the open section.
            current = heading.group(2) if len(heading.group(1)) == heading_level else None
            if current is not None:
                sections.setdefault(current, [])
            continue
        if current is not None:
            sections[current].append(line)

    return {name: "\n".join(lines).strip() for name, lines in sections.items()}


def list_items(text: str) -> list[str]:
    return [match.group(1) for match in map(LIST_ITEM_RE.match, text.splitlines()) if match]
