"""Text helpers shared by the catalog filter."""

from __future__ import annotations

import re
import unicodedata
from functools import lru_cache
from typing import Optional

from bs4 import BeautifulSoup

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_NON_ALNUM = re.compile(r"[^0-9a-zA-Z\s]")


def normalize_text(value: Optional[object]) -> str:
    """Return *value* as lowercase ASCII letters, digits and whitespace.

    Accented letters keep their base letter ("Cabeça" -> "cabeca"), any other
    symbol is dropped outright ("~cabe;a~" -> "cabea"). Internal whitespace is
    left as-is; only the ends are trimmed.
    """

    text = "" if value is None else str(value)
    decomposed = unicodedata.normalize("NFD", text)
    stripped = _COMBINING_MARKS.sub("", decomposed)
    return _NON_ALNUM.sub("", stripped).lower().strip()


def is_subsequence(text: str, pattern: str) -> bool:
    """Return True if the characters of *pattern* appear in *text* in order."""

    j = 0
    for char in text:
        if j == len(pattern):
            break
        if char == pattern[j]:
            j += 1
    return j == len(pattern)


@lru_cache(maxsize=4096)
def strip_markup(html: Optional[str]) -> str:
    if not html:
        return ""
    return BeautifulSoup(html, "html.parser").get_text(" ")
