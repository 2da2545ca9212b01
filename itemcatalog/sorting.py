"""Ordering of the item table and the sort-header toggle rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from .config import MISSING_ATTRIBUTE_VALUE

Item = Dict[str, object]

SORT_KEYS = ("name", "plaintext", "gold", "attribute")
ASCENDING = "ascending"
DESCENDING = "descending"
DIRECTIONS = (ASCENDING, DESCENDING)
NO_ATTRIBUTE = "default"


@dataclass(frozen=True)
class SortSpec:
    key: str = "name"
    direction: str = ASCENDING
    attribute: Optional[str] = None

    @classmethod
    def parse(cls, data: Optional[Mapping[str, object]]) -> "SortSpec":
        """Build a spec from request data, rejecting unknown keys or directions."""

        if not data:
            return DEFAULT_SORT
        if not isinstance(data, Mapping):
            raise ValueError("Sort spec must be an object")

        key = str(data.get("key") or data.get("sort") or DEFAULT_SORT.key)
        if key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key '{key}'")

        direction = str(data.get("direction") or DEFAULT_SORT.direction)
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown sort direction '{direction}'")

        attribute = data.get("attribute")
        if key == "attribute":
            return select_attribute_sort(str(attribute) if attribute else None)
        return cls(key, direction)

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {"key": self.key, "direction": self.direction, "attribute": self.attribute}


DEFAULT_SORT = SortSpec()


def attribute_value(item: Item, label: str) -> int:
    """Value of the first attribute named *label*, or -1 when the item lacks it."""

    for attribute in item.get("attributes") or []:
        if attribute.get("descricao") == label:
            return attribute.get("valor", MISSING_ATTRIBUTE_VALUE)
    return MISSING_ATTRIBUTE_VALUE


def _gold_total(item: Item) -> int:
    gold = item.get("gold") or {}
    return gold.get("total", 0)


def _text_key(key: str) -> Callable[[Item], str]:
    def lowered(item: Item) -> str:
        value = item.get(key)
        return "" if value is None else str(value).lower()

    return lowered


def sort_items(items: Sequence[Item], spec: SortSpec = DEFAULT_SORT) -> List[Item]:
    """Return a new list of *items* ordered by *spec*.

    Sorting is stable. Attribute ranking is always highest first, whatever
    direction the spec carries; an attribute spec without a label leaves the
    order untouched.
    """

    if spec.key == "attribute":
        if not spec.attribute:
            return list(items)
        label = spec.attribute
        return sorted(items, key=lambda item: attribute_value(item, label), reverse=True)

    key_func = _gold_total if spec.key == "gold" else _text_key(spec.key)
    return sorted(items, key=key_func, reverse=spec.direction == DESCENDING)


def request_sort(spec: SortSpec, key: str) -> SortSpec:
    """Next spec after the user clicks the *key* column header.

    Clicking the active ascending column flips it to descending; any other
    click starts ascending on that column and drops the attribute ranking.
    """

    if key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key '{key}'")
    if key == "attribute":
        return select_attribute_sort(spec.attribute)

    direction = ASCENDING
    if spec.key == key and spec.direction == ASCENDING:
        direction = DESCENDING
    return SortSpec(key, direction)


def select_attribute_sort(label: Optional[str]) -> SortSpec:
    """Rank by attribute *label*; an empty label restores the name order."""

    if label and label != NO_ATTRIBUTE:
        return SortSpec("attribute", DESCENDING, label)
    return DEFAULT_SORT
