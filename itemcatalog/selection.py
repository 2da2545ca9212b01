"""Item selection and the summary totals shown for it."""

from __future__ import annotations

from typing import AbstractSet, Dict, Iterable, Iterator, List, Sequence, Union

from .config import PERCENT_ATTRIBUTES, SELECTION_CAP

Item = Dict[str, object]
Number = Union[int, float]


class Selection:
    """Ordered set of item ids that never grows past ``capacity``."""

    def __init__(self, ids: Iterable[str] = (), capacity: int = SELECTION_CAP):
        self.capacity = capacity
        self._ids: List[str] = []
        for item_id in ids:
            self.add(item_id)

    def add(self, item_id: str) -> bool:
        """Add *item_id*; returns False when it is already present or the set is full."""
        item_id = str(item_id)
        if item_id in self._ids or len(self._ids) >= self.capacity:
            return False
        self._ids.append(item_id)
        return True

    def remove(self, item_id: str) -> bool:
        item_id = str(item_id)
        if item_id not in self._ids:
            return False
        self._ids.remove(item_id)
        return True

    def toggle(self, item_id: str) -> bool:
        if not self.remove(item_id):
            return self.add(item_id)
        return True

    def clear(self) -> None:
        self._ids.clear()

    @property
    def ids(self) -> List[str]:
        return list(self._ids)

    @property
    def is_full(self) -> bool:
        return len(self._ids) >= self.capacity

    def __contains__(self, item_id: object) -> bool:
        return str(item_id) in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._ids))

    def __len__(self) -> int:
        return len(self._ids)


def aggregate_selection(items: Sequence[Item], selected_ids: Iterable[str]) -> Dict[str, object]:
    """Total gold cost and per-label attribute sums of the selected items.

    Ids that match no item are ignored. Attributes with the same label are
    added together, across items and within a single item alike.
    """

    wanted = {str(item_id) for item_id in selected_ids}
    total_gold = 0
    sums: Dict[str, Number] = {}

    for item in items:
        if str(item.get("id")) not in wanted:
            continue
        gold = item.get("gold") or {}
        total_gold += gold.get("total") or 0
        for attribute in item.get("attributes") or []:
            label = attribute.get("descricao")
            sums[label] = sums.get(label, 0) + (attribute.get("valor") or 0)

    return {"total_gold": total_gold, "attributes": sums}


def format_attribute(
    label: str, value: Number, percent_labels: AbstractSet[str] = PERCENT_ATTRIBUTES
) -> Dict[str, object]:
    """Display entry for one summed attribute, with a '%' suffix for *percent_labels*."""
    percent = label in percent_labels
    return {
        "descricao": label,
        "valor": value,
        "percent": percent,
        "display": f"{value}%" if percent else str(value),
    }


def format_summary(
    summary: Dict[str, object], percent_labels: AbstractSet[str] = PERCENT_ATTRIBUTES
) -> List[Dict[str, object]]:
    """Display entries for every label of an ``aggregate_selection`` result."""
    return [
        format_attribute(label, value, percent_labels)
        for label, value in summary["attributes"].items()
    ]
