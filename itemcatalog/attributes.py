"""Numeric stat extraction from item description markup."""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Union

from bs4 import BeautifulSoup

Attribute = Dict[str, Union[str, int]]

STATS_TAG = "stats"
VALUE_TAG = "attention"

_LINE_BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_POSSESSIVE = re.compile(r"^de\s")


def _parse_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))


def _parse_fragment(fragment: str) -> Optional[Attribute]:
    soup = BeautifulSoup(fragment, "html.parser")
    highlighted = soup.find_all(VALUE_TAG)
    value = _parse_int("".join(tag.get_text() for tag in highlighted).strip())
    if value is None:
        return None

    for tag in highlighted:
        tag.decompose()
    label = _POSSESSIVE.sub("", soup.get_text().strip())
    return {"descricao": label, "valor": value}


def extract_attributes(html: Optional[str]) -> List[Attribute]:
    """Return the ``{descricao, valor}`` pairs found in an item description.

    Only the first ``<stats>`` block is read. Each line of it that starts with
    a numeric ``<attention>`` value becomes one attribute, labelled by the
    remaining text of the line; prose lines are skipped. The result keeps the
    order of the markup and may repeat labels.
    """

    if not html:
        return []

    stats = BeautifulSoup(html, "html.parser").find(STATS_TAG)
    if stats is None:
        return []

    inner = "".join(str(child) for child in stats.contents)
    attributes: List[Attribute] = []
    for fragment in _LINE_BREAK.split(inner):
        if not fragment.strip():
            continue
        attribute = _parse_fragment(fragment)
        if attribute is not None:
            attributes.append(attribute)
    return attributes
