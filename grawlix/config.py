"""Runtime configuration via environment variables and an optional YAML file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import regex
import yaml
from loguru import logger
from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .errors import GrawlixConfigError
from .patterns import tolerant_pattern


def _csv(val: Optional[str]) -> List[str]:
    if not val:
        return []
    out: List[str] = []
    for part in val.replace(";", ",").split(","):
        part = part.strip()
        if part and part not in out:
            out.append(part)
    return out


class Settings(BaseSettings):
    """Pydantic settings loaded from environment variables."""

    GRAWLIX_STYLE: str = Field(default="ascii")
    GRAWLIX_RANDOMIZE: bool = Field(default=True)

    # --- word/plugin lists (comma separated) ---
    GRAWLIX_ALLOWED: Optional[str] = None
    GRAWLIX_PLUGINS: Optional[str] = None

    # --- extra filters/styles ---
    GRAWLIX_CONFIG_FILE: Optional[str] = None

    GRAWLIX_LOG_LEVEL: Optional[str] = None

    @property
    def allowed_words(self) -> List[str]:
        return _csv(self.GRAWLIX_ALLOWED)

    @property
    def plugin_modules(self) -> List[str]:
        return _csv(self.GRAWLIX_PLUGINS)

    @validator("GRAWLIX_STYLE")
    def _style_required(cls, v: str) -> str:  # noqa: D401 - simple validation
        v = v.strip()
        if not v:
            raise ValueError("GRAWLIX_STYLE must name a style")
        return v

    def to_options(self) -> Dict[str, Any]:
        """Grawlix default options described by this configuration."""
        options: Dict[str, Any] = {
            "style": self.GRAWLIX_STYLE,
            "randomize": self.GRAWLIX_RANDOMIZE,
            "allowed": self.allowed_words,
            "filters": [],
            "styles": [],
            "plugins": list(self.plugin_modules),
        }
        if self.GRAWLIX_CONFIG_FILE:
            extra = load_config_file(self.GRAWLIX_CONFIG_FILE)
            for key in ("style", "randomize"):
                if key in extra:
                    options[key] = extra[key]
            options["allowed"] = options["allowed"] + [
                w for w in extra.get("allowed", []) if w not in options["allowed"]
            ]
            options["filters"] = extra.get("filters", [])
            options["styles"] = extra.get("styles", [])
            options["plugins"] = options["plugins"] + extra.get("plugins", [])
        return options


def _compile_filter(raw: Dict[str, Any], path: Path) -> Dict[str, Any]:
    out = dict(raw)
    word = out.get("word")
    pattern = out.pop("pattern", None)
    tolerant = out.pop("tolerant", False)
    if isinstance(pattern, str):
        try:
            out["pattern"] = regex.compile(pattern, regex.IGNORECASE)
        except regex.error as err:
            raise GrawlixConfigError(f"{path}: bad pattern for {word!r}: {err}") from err
    elif tolerant and isinstance(word, str) and word:
        out["pattern"] = tolerant_pattern(word)
        out.setdefault("expandable", True)
    return out


def load_config_file(path: str) -> Dict[str, Any]:
    """Read grawlix options from a YAML mapping.

    Recognized keys: ``style``, ``randomize``, ``allowed``, ``filters``,
    ``styles`` and ``plugins``. Filter ``pattern`` strings are compiled
    case-insensitively; ``tolerant: true`` builds the pattern from the word.
    """
    p = Path(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as err:
        raise GrawlixConfigError(f"can't read grawlix config {p}: {err}") from err
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise GrawlixConfigError(f"{p}: top level must be a mapping")

    out: Dict[str, Any] = {}
    if "style" in data:
        out["style"] = data["style"]
    if "randomize" in data:
        out["randomize"] = bool(data["randomize"])
    for key in ("allowed", "filters", "styles", "plugins"):
        val = data.get(key) or []
        if not isinstance(val, list):
            raise GrawlixConfigError(f"{p}: {key} must be a list")
        out[key] = val
    out["allowed"] = [str(w).strip() for w in out["allowed"] if str(w).strip()]
    out["plugins"] = [str(m).strip() for m in out["plugins"] if str(m).strip()]
    filters = []
    for raw in out["filters"]:
        if not isinstance(raw, dict):
            raise GrawlixConfigError(f"{p}: filter entries must be mappings")
        filters.append(_compile_filter(raw, p))
    out["filters"] = filters
    logger.info(f"Loaded grawlix config {p} ({len(filters)} filters, {len(out['styles'])} styles)")
    return out


# Instantiate once for app-wide use
settings = Settings()

__all__ = ["Settings", "settings", "load_config_file"]
