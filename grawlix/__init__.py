"""Make the world a little less cussy.

    >>> import grawlix
    >>> grawlix.censor("fuck this shit I'm out", randomize=False)
    "%!&# this $#!% I'm out"

Module-level functions share one :class:`Grawlix` built lazily from the
environment (see :mod:`grawlix.config`). Hosts that want explicit state can
create their own ``Grawlix`` instead.
"""

from typing import Any, Iterable, Mapping, Optional

from loguru import logger

from .core import DEFAULT_OPTIONS, Grawlix
from .errors import (
    GrawlixConfigError,
    GrawlixError,
    GrawlixFilterError,
    GrawlixPluginError,
    GrawlixStyleError,
)
from .filters import FILTERS, FilterTemplate, GrawlixFilter, to_grawlix_filter
from .patterns import tolerant_filter, tolerant_pattern
from .plugin import GrawlixPlugin
from .styles import STYLES, GrawlixStyle, Style, to_grawlix_style

__version__ = "1.0.0"

# silent unless the host opts in via grawlix.logsetup.setup_logging()
logger.disable("grawlix")

_instance: Optional[Grawlix] = None


def _shared() -> Grawlix:
    global _instance
    if _instance is None:
        from .config import settings

        _instance = Grawlix.from_settings(settings)
    return _instance


def reset() -> None:
    """Forget the shared instance; the next call rebuilds it from the environment."""
    global _instance
    _instance = None


def censor(text: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> str:
    return _shared().censor(text, options, **kwargs)


def is_obscene(text: str, filters: Optional[Iterable[Any]] = None,
               allowed: Optional[Iterable[str]] = None) -> bool:
    return _shared().is_obscene(text, filters, allowed)


def get_defaults():
    return _shared().get_defaults()


def set_defaults(options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Grawlix:
    return _shared().set_defaults(options, **kwargs)


def load_plugin(plugin: Any, plugin_options: Optional[Mapping[str, Any]] = None) -> Grawlix:
    return _shared().load_plugin(plugin, plugin_options)


def has_plugin(plugin: Any) -> bool:
    return _shared().has_plugin(plugin)


__all__ = [
    "DEFAULT_OPTIONS",
    "FILTERS",
    "STYLES",
    "FilterTemplate",
    "Grawlix",
    "GrawlixConfigError",
    "GrawlixError",
    "GrawlixFilter",
    "GrawlixFilterError",
    "GrawlixPlugin",
    "GrawlixPluginError",
    "GrawlixStyle",
    "GrawlixStyleError",
    "Style",
    "censor",
    "get_defaults",
    "has_plugin",
    "is_obscene",
    "load_plugin",
    "reset",
    "set_defaults",
    "to_grawlix_filter",
    "to_grawlix_style",
    "tolerant_filter",
    "tolerant_pattern",
]
