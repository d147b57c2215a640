"""Plugin descriptor: extra filters and styles bundled under one name."""

from __future__ import annotations

import types
from typing import Any, Callable, List, Mapping, Optional


class GrawlixPlugin:
    """Bundle of filters and styles that extends the default catalog.

    Accepts a bare name, a descriptor mapping, or keyword arguments::

        GrawlixPlugin("my-plugin")
        GrawlixPlugin({"name": "my-plugin", "filters": [...]})
        GrawlixPlugin(name="my-plugin", styles=[...], init=lambda self, opts: ...)

    A supplied ``init`` is bound to the plugin, so it always receives the
    plugin instance as ``self``.
    """

    def __init__(self, obj: Any = None, **kwargs: Any):
        self.name: Optional[str] = None
        self.filters: List[Any] = []
        self.styles: List[Any] = []
        if isinstance(obj, str):
            kwargs.setdefault("name", obj)
        elif isinstance(obj, Mapping):
            kwargs = {**obj, **kwargs}
        if isinstance(kwargs.get("name"), str):
            self.name = kwargs["name"]
        if isinstance(kwargs.get("filters"), list):
            self.filters = kwargs["filters"]
        if isinstance(kwargs.get("styles"), list):
            self.styles = kwargs["styles"]
        init: Optional[Callable[..., Any]] = kwargs.get("init")
        if callable(init):
            self.init = types.MethodType(init, self)  # type: ignore[method-assign]

    def __repr__(self) -> str:
        return f"<GrawlixPlugin name={self.name!r}>"

    def init(self, options: Mapping[str, Any]) -> None:
        """Called once when the plugin loads; override in subclasses."""
