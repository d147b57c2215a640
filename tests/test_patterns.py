import sys, pathlib
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

import pytest

from grawlix import Grawlix
from grawlix.patterns import tolerant_filter, tolerant_pattern


@pytest.mark.parametrize(
    "txt",
    ["crap", "CRAP", "cr4p", "c r a p", "c.r.a.p", "c\nr\na\np", "crrraaap", "crap!", "c\u00a0r\u00a0a\u00a0p"],
)
def test_tolerant_variants_detected(txt):
    assert tolerant_pattern("crap").search(txt)


@pytest.mark.parametrize("txt", ["scrapple", "crappy", "crapola"])
def test_tolerant_false_positive(txt):
    assert tolerant_pattern("crap").search(txt) is None


def test_phrase():
    pat = tolerant_pattern("bazd meg")
    for txt in ("bazd meg", "bazd\nmeg", "bazdmeg", "b4zd   meg"):
        assert pat.search(txt), txt


def test_separator_limit():
    assert tolerant_pattern("crap", sepmax=1).search("c r a p")
    assert tolerant_pattern("crap", sepmax=1).search("c  r  a  p") is None


def test_empty_word():
    with pytest.raises(ValueError):
        tolerant_pattern("   ")


def test_tolerant_filter_censors_whole_span():
    f = tolerant_filter("crap")
    assert f.word == "crap"
    assert f.is_expandable
    g = Grawlix(style="asterix", filters=[f])
    assert g.censor("oh c r a p!") == "oh *******!"
    assert g.censor("oh crrraaap") == "oh ********"
