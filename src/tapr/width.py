"""Display-width measurement for grapheme clusters.

Cells are measured and wrapped one grapheme cluster at a time, so both the
statistics pass and the row renderer go through :func:`segment` and
:func:`cluster_width`.
"""

from __future__ import annotations

import unicodedata

import grapheme
import wcwidth as _wcwidth


def segment(text: str) -> list[str]:
    """Split *text* into grapheme clusters."""
    return list(grapheme.graphemes(text))


# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Cluster width
# ---------------------------------------------------------------------------

def cluster_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Control characters, combining marks and format characters -> 0
    2. Emoji sequences (VS16, ZWJ, skin tones, regional indicators) -> 2
    3. Otherwise delegate to wcwidth for the first codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp == 0xFE0F:  # VS16
            return 2
        if cp == 0x200D:  # ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first = g[0]
    first_cp = ord(first)
    if first_cp >= 0x1F000:
        return 2
    if 0x2600 <= first_cp <= 0x27BF:
        return 2

    cat = unicodedata.category(first)
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(first), 0)


def display_width(text: str) -> int:
    """Return the number of terminal columns *text* occupies."""
    if not text:
        return 0

    if all(0x20 <= ord(ch) <= 0x7E for ch in text):
        return len(text)

    cached = _width_cache.get(text)
    if cached is not None:
        return cached

    total = sum(cluster_width(g) for g in grapheme.graphemes(text))
    return _cache_width(text, total)
