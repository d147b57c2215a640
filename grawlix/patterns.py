"""Obfuscation-tolerant patterns built from plain words.

``tolerant_pattern("crap")`` matches "crap", "CRAP", "cr4p", "c r a p",
"c.r.a.p" and "crrraaap", but not the "crap" inside "scrapple".
"""

from __future__ import annotations

from typing import Any

import regex

from .filters import GrawlixFilter

__all__ = ["SUBS", "tolerant_pattern", "tolerant_filter"]

# leetspeak look-alikes per letter
SUBS = {
    "a": "[a@4]",
    "b": "[b8]",
    "e": "[e3]",
    "g": "[g69]",
    "i": "[i1!|]",
    "l": "[l1|]",
    "o": "[o0]",
    "s": "[s$5]",
    "t": "[t7+]",
    "z": "[z2]",
}
BOUND_L = r"(?<!\p{L})"
BOUND_R = r"(?!\p{L})"


def _letter(c: str, rmax: int) -> str:
    return f"(?:{SUBS.get(c, regex.escape(c))}){{1,{rmax}}}"


def tolerant_pattern(word: str, sepmax: int = 4, repeatmax: int = 8):
    """Case-insensitive pattern for ``word`` bounded by non-letters.

    Every letter may repeat up to ``repeatmax`` times and be followed by up
    to ``sepmax`` non-letters; phrases join their words the same way.
    """
    letters = [c for c in word.strip().lower() if not c.isspace()]
    if not letters:
        raise ValueError("tolerant_pattern() needs a non-empty word")
    rmax = max(1, min(int(repeatmax or 1), 16))
    # anything that isn't a letter: spaces, punctuation, emoji
    gap = rf"\P{{L}}{{0,{max(0, min(int(sepmax or 0), 8))}}}"
    body = gap.join(_letter(c, rmax) for c in letters)
    return regex.compile(rf"{BOUND_L}{body}{BOUND_R}", regex.IGNORECASE | regex.UNICODE)


def tolerant_filter(word: str, sepmax: int = 4, repeatmax: int = 8, **options: Any) -> GrawlixFilter:
    """Expandable :class:`GrawlixFilter` for ``word`` using :func:`tolerant_pattern`."""
    options.setdefault("expandable", True)
    return GrawlixFilter(word, tolerant_pattern(word, sepmax, repeatmax), **options)
