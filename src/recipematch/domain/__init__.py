from .markdown import (
    FRONTMATTER_RE,
    MarkdownDocument,
    extract_sections,
    list_items,
    split_frontmatter,
)
from .models import (
    TAG_FIELDS,
    Difficulty,
    MatchResult,
    Recipe,
    Selection,
    SelectionCategory,
)

__all__ = [
    "FRONTMATTER_RE",
    "TAG_FIELDS",
    "Difficulty",
    "MarkdownDocument",
    "MatchResult",
    "Recipe",
    "Selection",
    "SelectionCategory",
    "extract_sections",
    "list_items",
    "split_frontmatter",
]
