"""Free-text filtering over the enriched item collection."""

from __future__ import annotations

from typing import Dict, List, Sequence

from .config import FUZZY_MIN_LENGTH
from .text import is_subsequence, normalize_text, strip_markup

Item = Dict[str, object]


def _haystacks(item: Item) -> List[str]:
    tags = " ".join(str(tag) for tag in item.get("tags") or [])
    description = f"{strip_markup(item.get('description'))} {tags}"
    return [
        normalize_text(item.get("name")),
        normalize_text(item.get("plaintext")),
        normalize_text(description),
    ]


def matches(item: Item, normalized_query: str) -> bool:
    haystacks = _haystacks(item)
    if any(normalized_query in haystack for haystack in haystacks):
        return True

    # Very short patterns are a subsequence of nearly everything.
    if len(normalized_query) >= FUZZY_MIN_LENGTH:
        return any(is_subsequence(haystack, normalized_query) for haystack in haystacks)
    return False


def filter_items(items: Sequence[Item], query: str) -> List[Item]:
    """Return the items matching *query*, in their original order.

    An empty query keeps everything. Otherwise an item is kept when the
    normalized query is contained in its normalized name, plaintext or
    description, or, for queries of three or more characters, when it is a
    subsequence of one of them.
    """

    if not query:
        return list(items)

    normalized_query = normalize_text(query)
    return [item for item in items if matches(item, normalized_query)]
