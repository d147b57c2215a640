"""Grawlix string generation."""

from __future__ import annotations

import random

from .errors import GrawlixStyleError

__all__ = ["get_fill_grawlix", "get_random_grawlix"]

# a grawlix never ends on this character
_NO_TAIL = "!"


def get_fill_grawlix(chars: str, length: int) -> str:
    """Repeat the first character of ``chars`` ``length`` times."""
    if not chars:
        raise GrawlixStyleError("fill grawlix needs at least one character")
    return chars[0] * max(0, length)


def get_random_grawlix(chars: str, length: int) -> str:
    """Random grawlix drawn from ``chars``.

    No character directly repeats the one before it and the last character
    is never ``!``. Raises :class:`GrawlixStyleError` when the palette leaves
    no legal choice for some position.
    """
    palette = list(chars)
    out = []
    prev = None
    for i in range(max(0, length)):
        last = i == length - 1
        allowed = [c for c in palette if c != prev and not (last and c == _NO_TAIL)]
        if not allowed:
            raise GrawlixStyleError(
                f"characters {chars!r} can't produce a random grawlix of length {length}"
            )
        prev = random.choice(allowed)
        out.append(prev)
    return "".join(out)
