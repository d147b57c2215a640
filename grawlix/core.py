"""The censor object: default options, cached settings and the public calls."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from loguru import logger

from . import util
from .logsetup import setup_logging
from .styles import Style

DEFAULT_OPTIONS: Dict[str, Any] = {
    "style": Style.ASCII,
    "randomize": True,
    "allowed": [],
    "filters": [],
    "styles": [],
    "plugins": [],
}


def _own(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy options so list values aren't shared with the caller."""
    return {k: list(v) if isinstance(v, list) else v for k, v in options.items()}


class Grawlix:
    """Replaces curse words with cartoon-like grawlixes.

    An instance owns its default options and caches the settings resolved
    from them; ``set_defaults``/``load_plugin`` drop that cache. Calls that
    pass their own options always get freshly resolved settings.

    Not thread-safe: serialize default changes against concurrent calls.
    """

    def __init__(self, **defaults: Any):
        self._defaults: Dict[str, Any] = _own({**DEFAULT_OPTIONS, **defaults})
        self._settings: Optional[util.GrawlixSettings] = None

    @classmethod
    def from_settings(cls, settings) -> "Grawlix":
        """Build from a :class:`grawlix.config.Settings` instance."""
        if settings.GRAWLIX_LOG_LEVEL:
            setup_logging(settings.GRAWLIX_LOG_LEVEL)
        return cls(**settings.to_options())

    def __call__(self, text: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> str:
        return self.censor(text, options, **kwargs)

    # ---- settings ----
    def _default_settings(self) -> util.GrawlixSettings:
        if self._settings is None:
            self._settings = util.parse_options(None, self._defaults)
        return self._settings

    def get_defaults(self) -> Dict[str, Any]:
        return _own(self._defaults)

    def set_defaults(self, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "Grawlix":
        self._defaults = _own({**self._defaults, **(options or {}), **kwargs})
        self._settings = None
        return self

    def load_plugin(self, plugin: Any, plugin_options: Optional[Mapping[str, Any]] = None) -> "Grawlix":
        """Add a plugin to the defaults; it is resolved on the next call."""
        info = {"plugin": plugin, "options": dict(plugin_options or {})}
        if plugin_options and plugin_options.get("name"):
            info["name"] = plugin_options["name"]
        self._defaults["plugins"] = list(self._defaults.get("plugins") or []) + [info]
        self._settings = None
        logger.debug(f"Queued grawlix plugin {plugin!r}")
        return self

    def has_plugin(self, plugin: Any) -> bool:
        return util.has_plugin(plugin, self._defaults)

    # ---- public calls ----
    def censor(self, text: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> str:
        """Replace every obscenity in ``text``.

        ``options`` (or keyword arguments) override the defaults for this
        call only: ``style``, ``randomize``, ``allowed``, ``filters``,
        ``styles`` and ``plugins``.
        """
        if options is None and not kwargs:
            settings = self._default_settings()
        else:
            settings = util.parse_options({**(options or {}), **kwargs}, self._defaults)
        return util.replace_matches(text, settings)

    def is_obscene(
        self,
        text: str,
        filters: Optional[Iterable[Any]] = None,
        allowed: Optional[Iterable[str]] = None,
    ) -> bool:
        """True if any active filter matches ``text``."""
        if filters is None and allowed is None:
            settings = self._default_settings()
        else:
            overrides: Dict[str, Any] = {}
            if filters is not None:
                overrides["filters"] = list(filters)
            if allowed is not None:
                overrides["allowed"] = list(allowed)
            settings = util.parse_options(overrides, self._defaults, probe=True)
        return util.is_match(text, settings)
