"""Exception types raised while building or applying grawlix settings."""

from __future__ import annotations

from typing import Any, Optional


def _name_of(obj: Any) -> Optional[str]:
    if obj is None:
        return None
    if isinstance(obj, dict):
        name = obj.get("name")
    else:
        name = getattr(obj, "name", None)
    return name if isinstance(name, str) and name else None


class GrawlixError(Exception):
    """Base class for every grawlix error."""


class GrawlixConfigError(GrawlixError):
    """Options or configuration files that can't be turned into settings."""


class GrawlixFilterError(GrawlixError):
    """A filter descriptor is missing its word or a compiled pattern."""

    def __init__(self, msg: str, *, filter: Any = None, plugin: Any = None):
        super().__init__(msg)
        self.filter = filter
        self.plugin = plugin


class GrawlixStyleError(GrawlixError):
    """A style is invalid, unknown, or can't produce the requested grawlix."""

    def __init__(
        self,
        msg: str,
        *,
        style: Any = None,
        style_name: Optional[str] = None,
        plugin: Any = None,
    ):
        self.style = style
        self.style_name = style_name or _name_of(style)
        self.plugin = plugin
        if self.style_name:
            msg = f"{msg} (style: {self.style_name})"
        super().__init__(msg)


class GrawlixPluginError(GrawlixError):
    """A plugin couldn't be resolved, or its filters/styles failed to load."""

    def __init__(
        self,
        msg: str,
        *,
        plugin: Any = None,
        base_error: Optional[BaseException] = None,
    ):
        self.plugin = plugin
        self.base_error = base_error
        name = _name_of(plugin)
        if name:
            msg = f"{msg} (plugin: {name})"
        if base_error is not None:
            msg = f"{msg}\nbase error - {base_error}"
        super().__init__(msg)
