"""Tests for the Pydantic Settings helper and the YAML config file."""

from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from grawlix import Grawlix
from grawlix.config import Settings, load_config_file
from grawlix.errors import GrawlixConfigError

ENV = ("GRAWLIX_STYLE", "GRAWLIX_RANDOMIZE", "GRAWLIX_ALLOWED",
       "GRAWLIX_PLUGINS", "GRAWLIX_CONFIG_FILE", "GRAWLIX_LOG_LEVEL")

YAML = """\
style: asterix
randomize: false
allowed:
  - dick
filters:
  - word: crap
    pattern: '\\bcrap\\b'
    priority: 1
  - word: heck
    tolerant: true
  - word: fuck
    style: redacted
styles:
  - name: rook
    char: "♜"
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    cfg = Settings()
    assert cfg.GRAWLIX_STYLE == "ascii"
    assert cfg.GRAWLIX_RANDOMIZE is True
    assert cfg.allowed_words == []
    assert cfg.plugin_modules == []
    assert cfg.GRAWLIX_LOG_LEVEL is None


def test_allowed_parsing(monkeypatch):
    monkeypatch.setenv("GRAWLIX_ALLOWED", "dick, Dick;cunt,,dick")
    cfg = Settings()
    assert cfg.allowed_words == ["dick", "Dick", "cunt"]


def test_plugin_modules_parsing(monkeypatch):
    monkeypatch.setenv("GRAWLIX_PLUGINS", "a.b , c")
    assert Settings().plugin_modules == ["a.b", "c"]


def test_empty_style_rejected(monkeypatch):
    monkeypatch.setenv("GRAWLIX_STYLE", "  ")
    try:
        Settings()
    except ValueError:
        pass
    else:
        raise AssertionError("empty style should raise")


def test_to_options_env_only(monkeypatch):
    monkeypatch.setenv("GRAWLIX_STYLE", "nextwave")
    monkeypatch.setenv("GRAWLIX_RANDOMIZE", "0")
    monkeypatch.setenv("GRAWLIX_ALLOWED", "tits")
    opts = Settings().to_options()
    assert opts == {
        "style": "nextwave",
        "randomize": False,
        "allowed": ["tits"],
        "filters": [],
        "styles": [],
        "plugins": [],
    }


def test_load_config_file(tmp_path):
    path = tmp_path / "grawlix.yaml"
    path.write_text(YAML, encoding="utf-8")
    data = load_config_file(str(path))
    assert data["style"] == "asterix"
    assert data["randomize"] is False
    assert data["allowed"] == ["dick"]
    crap, heck, fuck = data["filters"]
    assert crap["pattern"].search("oh CRAP")
    assert not crap["pattern"].search("scrap")
    assert heck["pattern"].search("h 3 c k")
    assert heck["expandable"] is True
    assert "pattern" not in fuck
    assert data["styles"] == [{"name": "rook", "char": "♜"}]


def test_config_file_drives_grawlix(tmp_path, monkeypatch):
    path = tmp_path / "grawlix.yaml"
    path.write_text(YAML, encoding="utf-8")
    monkeypatch.setenv("GRAWLIX_CONFIG_FILE", str(path))
    monkeypatch.setenv("GRAWLIX_ALLOWED", "cunt")
    cfg = Settings()
    opts = cfg.to_options()
    assert opts["style"] == "asterix"
    assert opts["allowed"] == ["cunt", "dick"]

    g = Grawlix.from_settings(cfg)
    assert g.censor("oh crap, what the h.e.c.k") == "oh ****, what the *******"
    assert g.censor("fuck you Dick") == "████ you Dick"


def test_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config_file(str(path)) == {"allowed": [], "filters": [], "styles": [], "plugins": []}


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "filters: crap\n",
        "filters:\n  - crap\n",
        "filters:\n  - word: crap\n    pattern: '(unclosed'\n",
        "style: [unbalanced\n",
    ],
)
def test_bad_files(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(GrawlixConfigError):
        load_config_file(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(GrawlixConfigError):
        load_config_file(str(tmp_path / "nope.yaml"))
