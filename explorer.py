"""Catalog pipeline behind the item explorer endpoints."""

from __future__ import annotations

import logging
from typing import AbstractSet, Dict, Iterable, List, Optional

from itemcatalog.config import DEFAULT_MAP_ID, PERCENT_ATTRIBUTES
from itemcatalog.ddragon import all_attribute_labels, build_items, fetch_items_payload, fetch_maps
from itemcatalog.filtering import filter_items
from itemcatalog.selection import Selection, aggregate_selection, format_summary
from itemcatalog.sorting import DEFAULT_SORT, SortSpec, sort_items

logger = logging.getLogger(__name__)

Item = Dict[str, object]

_payload: Optional[Dict[str, object]] = None
_maps: Optional[List[Dict[str, object]]] = None
_items: Dict[str, List[Item]] = {}
_labels: Optional[List[str]] = None


def load_payload(refresh: bool = False) -> Optional[Dict[str, object]]:
    """Return the raw item document, fetching it on first use or on *refresh*.

    A failed fetch is not remembered, so the next call tries again.
    """

    global _payload, _labels
    if _payload is None or refresh:
        _payload = fetch_items_payload()
        _items.clear()
        _labels = None
        if _payload is not None:
            logger.info("Loaded item catalog version %s", _payload.get("version", "?"))
    return _payload


def load_catalog(map_id: str = DEFAULT_MAP_ID, refresh: bool = False) -> List[Item]:
    """Enriched items sold on *map_id*, built once per fetched payload."""

    payload = load_payload(refresh=refresh)
    if map_id in _items:
        return _items[map_id]

    items = build_items(payload, map_id)
    logger.info("Map %s has %d purchasable items", map_id, len(items))
    if payload is not None:
        _items[map_id] = items
    return items


def load_attribute_labels(refresh: bool = False) -> List[str]:
    """Sorted attribute labels found anywhere in the payload, whatever the map."""

    global _labels
    payload = load_payload(refresh=refresh)
    if _labels is None:
        labels = all_attribute_labels(payload)
        if payload is not None:
            _labels = labels
        return labels
    return _labels


def load_maps(refresh: bool = False) -> List[Dict[str, object]]:
    global _maps
    if _maps is None or refresh:
        maps = fetch_maps()
        _maps = maps or None
        return maps
    return _maps


def reset_cache() -> None:
    global _payload, _maps, _labels
    _payload = None
    _maps = None
    _labels = None
    _items.clear()


def explore(items: List[Item], query: str = "", spec: SortSpec = DEFAULT_SORT) -> List[Item]:
    """Filter *items* by *query*, then order the survivors by *spec*."""

    filtered = filter_items(items, query)
    if query:
        logger.info("Query '%s' kept %d of %d items", query, len(filtered), len(items))
    return sort_items(filtered, spec)


def summarize(
    items: List[Item],
    ids: Iterable[str],
    percent_labels: AbstractSet[str] = PERCENT_ATTRIBUTES,
) -> Dict[str, object]:
    selection = Selection(ids)
    summary = aggregate_selection(items, selection.ids)
    return {
        "selected": selection.ids,
        "total_gold": summary["total_gold"],
        "attributes": format_summary(summary, percent_labels),
    }
