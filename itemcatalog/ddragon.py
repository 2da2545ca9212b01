"""Data Dragon item catalog and Riot map metadata."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .attributes import extract_attributes
from .config import DEFAULT_MAP_ID, ITEM_IMAGE_URL, ITEMS_URL, MAPS_URL
from .utils import safe_get_json

logger = logging.getLogger(__name__)

Item = Dict[str, object]


def fetch_items_payload(url: str = ITEMS_URL) -> Optional[Dict[str, object]]:
    """Return the ``{type, version, data}`` item document, or None on failure."""

    payload = safe_get_json(url)
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
        logger.warning("Item catalog at %s is unavailable or malformed", url)
        return None
    return payload


def fetch_maps(url: str = MAPS_URL) -> List[Dict[str, object]]:
    payload = safe_get_json(url)
    if not isinstance(payload, list):
        logger.warning("Map metadata at %s is unavailable or malformed", url)
        return []
    return [entry for entry in payload if isinstance(entry, dict) and "mapId" in entry]


def _is_available(record: Dict[str, object], map_id: str) -> bool:
    gold = record.get("gold") or {}
    maps = record.get("maps") or {}
    return (gold.get("total") or 0) > 0 and maps.get(str(map_id)) is True


def build_items(payload: Optional[Dict[str, object]], map_id: str = DEFAULT_MAP_ID) -> List[Item]:
    """Enrich the raw records of *payload* and keep those sold on *map_id*.

    Each returned item is a new dict holding the record's fields plus its
    ``id`` key and the ``attributes`` parsed from its description. Records
    with no cost or not available on the map are dropped.
    """

    if not payload:
        return []

    items: List[Item] = []
    for item_id, record in (payload.get("data") or {}).items():
        if not isinstance(record, dict) or not _is_available(record, map_id):
            continue
        item = dict(record)
        item["id"] = str(item_id)
        item["attributes"] = extract_attributes(record.get("description", ""))
        items.append(item)
    return items


def unique_attributes(items: Iterable[Item]) -> List[str]:
    labels = {
        attribute["descricao"]
        for item in items
        for attribute in item.get("attributes") or []
    }
    return sorted(labels)


def all_attribute_labels(payload: Optional[Dict[str, object]]) -> List[str]:
    """Labels from every record of *payload*, before any map or cost filtering."""

    records = (payload or {}).get("data") or {}
    return unique_attributes(
        {"attributes": extract_attributes(record.get("description", ""))}
        for record in records.values()
        if isinstance(record, dict)
    )


def item_image_url(item: Item) -> Optional[str]:
    image = item.get("image") or {}
    full = image.get("full")
    if not full:
        return None
    return ITEM_IMAGE_URL.format(image=full)
