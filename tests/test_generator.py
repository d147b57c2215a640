from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from grawlix.errors import GrawlixStyleError
from grawlix.generator import get_fill_grawlix, get_random_grawlix


def test_fill_uses_first_char():
    assert get_fill_grawlix("*", 16) == "*" * 16
    assert get_fill_grawlix("*!", 16) == "*" * 16
    assert get_fill_grawlix("☠", 4) == "☠☠☠☠"
    assert get_fill_grawlix("*", 0) == ""


def test_fill_needs_a_char():
    with pytest.raises(GrawlixStyleError):
        get_fill_grawlix("", 3)


@pytest.mark.parametrize("length", [1, 4, 10, 32])
def test_random_length_and_palette(length):
    chars = "!@#$%^&*"
    out = get_random_grawlix(chars, length)
    assert len(out) == length
    assert set(out) <= set(chars)


def test_random_never_repeats_or_ends_on_bang():
    chars = "!@#$%★☒☎☠☢☣☹♡♢♤♧"
    for _ in range(2000):
        out = get_random_grawlix(chars, 16)
        assert all(a != b for a, b in zip(out, out[1:]))
        assert out[-1] != "!"


def test_random_small_palettes():
    assert get_random_grawlix("ab", 4) in ("abab", "baba")
    assert get_random_grawlix("x", 1) == "x"


def test_random_degenerate_palette_raises():
    with pytest.raises(GrawlixStyleError):
        get_random_grawlix("x", 2)
    with pytest.raises(GrawlixStyleError):
        get_random_grawlix("!", 1)
    with pytest.raises(GrawlixStyleError):
        get_random_grawlix("", 1)
