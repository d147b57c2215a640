"""Options parsing (settings resolution) and the match/replace engine."""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from loguru import logger

from .errors import (
    GrawlixConfigError,
    GrawlixFilterError,
    GrawlixPluginError,
    GrawlixStyleError,
)
from .filters import FILTERS, GrawlixFilter, filter_sort, to_grawlix_filter
from .plugin import GrawlixPlugin
from .styles import STYLES, GrawlixStyle, to_grawlix_style

__all__ = [
    "GrawlixSettings",
    "parse_options",
    "load_plugin",
    "load_filters",
    "load_styles",
    "resolve_plugin",
    "has_plugin",
    "is_match",
    "replace_matches",
    "replace_match",
    "generate_grawlix",
]


@dataclass
class GrawlixSettings:
    """Resolved configuration for one censor/probe call."""

    is_random: bool = True
    filters: List[GrawlixFilter] = field(default_factory=list)
    style: Optional[GrawlixStyle] = None
    styles: List[GrawlixStyle] = field(default_factory=list)
    loaded_plugins: List[str] = field(default_factory=list)


def _find(items: Iterable[Any], attr: str, value: Any) -> Any:
    return next((i for i in items if getattr(i, attr, None) == value), None)


def _put(items: List[Any], item: Any, attr: str) -> None:
    """Replace the entry sharing ``attr`` with ``item`` in place, or append."""
    key = getattr(item, attr)
    for i, existing in enumerate(items):
        if getattr(existing, attr) == key:
            items[i] = item
            return
    items.append(item)


def _replaced_words(filters: Iterable[Any]) -> set:
    words = set()
    for obj in filters:
        if isinstance(obj, GrawlixFilter):
            words.add(obj.word)
        elif isinstance(obj, Mapping) and "word" in obj and "pattern" in obj:
            words.add(obj["word"])
    return words


def parse_options(
    options: Optional[Mapping[str, Any]] = None,
    defaults: Optional[Mapping[str, Any]] = None,
    probe: bool = False,
) -> GrawlixSettings:
    """Resolve raw options (over ``defaults``) into a :class:`GrawlixSettings`.

    Default filters and styles are cloned, so nothing done here leaks back
    into the shared catalogs. With ``probe`` the main style isn't resolved;
    such settings can answer :func:`is_match` but not replace anything.
    """
    opts: Dict[str, Any] = dict(defaults or {})
    opts.update(options or {})
    randomize = opts.get("randomize", True)
    settings = GrawlixSettings(is_random=True if randomize is None else bool(randomize))

    allowed = list(opts.get("allowed") or [])
    user_filters = list(opts.get("filters") or [])
    replaced = _replaced_words(user_filters)

    # default filters, minus whitelisted and fully replaced words
    for f in FILTERS:
        if f.word in allowed or f.word in replaced or not f.is_valid():
            continue
        settings.filters.append(f.clone())
    for style in STYLES:
        if style.is_valid():
            settings.styles.append(style.clone())

    for info in opts.get("plugins") or []:
        load_plugin(settings, info, opts)

    load_filters(settings, user_filters, allowed)
    settings.filters.sort(key=filter_sort)
    load_styles(settings, opts.get("styles") or [])

    if not probe:
        settings.style = _resolve_style(settings, opts.get("style"))
    logger.debug(
        f"Resolved grawlix settings: {len(settings.filters)} filters, "
        f"{len(settings.styles)} styles, plugins={settings.loaded_plugins}"
    )
    return settings


def _resolve_style(settings: GrawlixSettings, style_opt: Any) -> GrawlixStyle:
    if style_opt is None:
        raise GrawlixConfigError("grawlix main style not defined")
    if isinstance(style_opt, GrawlixStyle):
        if not style_opt.is_valid():
            raise GrawlixStyleError("invalid main style", style=style_opt)
        return style_opt
    if isinstance(style_opt, str):
        style = _find(settings.styles, "name", style_opt)
        if style is None:
            raise GrawlixStyleError("style not found", style_name=style_opt)
        return style
    if isinstance(style_opt, Mapping) and style_opt.get("name"):
        style = _find(settings.styles, "name", style_opt["name"])
        if style is None:
            return to_grawlix_style(style_opt)
        style.configure(style_opt)
        if not style.is_valid():
            raise GrawlixStyleError("main style is invalid after configuration", style=style)
        return style
    raise GrawlixStyleError("main style must be a name, a mapping with a name, or a GrawlixStyle",
                            style=style_opt)


# ---- plugins ----
def _import_plugin(name: str) -> Any:
    try:
        module = importlib.import_module(name)
    except Exception as err:
        raise GrawlixPluginError(f"can't import plugin module {name!r}",
                                 plugin=name, base_error=err) from err
    ref = getattr(module, "setup", None)
    if not callable(ref):
        ref = getattr(module, "plugin", None)
    if ref is None:
        raise GrawlixPluginError(f"module {name!r} has neither setup() nor a plugin attribute",
                                 plugin=name)
    return ref


def resolve_plugin(plugin_info: Any, options: Mapping[str, Any]) -> Tuple[GrawlixPlugin, Any]:
    """Turn any accepted plugin reference into ``(plugin, plugin_options)``.

    ``plugin_info`` may be a :class:`GrawlixPlugin`, a factory
    ``(plugin_options, options) -> GrawlixPlugin``, a dotted module name, or
    a ``{"plugin": ..., "options": {...}}`` wrapper around any of those.
    """
    ref = plugin_info
    plugin_opts: Any = {}
    if isinstance(plugin_info, Mapping):
        if "plugin" not in plugin_info:
            raise GrawlixPluginError("plugin is undefined", plugin=plugin_info)
        ref = plugin_info["plugin"]
        if plugin_info.get("options") is not None:
            plugin_opts = plugin_info["options"]
    if isinstance(ref, str):
        ref = _import_plugin(ref)

    if isinstance(ref, GrawlixPlugin):
        plugin = ref
    elif callable(ref):
        try:
            plugin = ref(plugin_opts, options)
        except Exception as err:
            raise GrawlixPluginError("plugin factory failed", plugin=plugin_info,
                                     base_error=err) from err
    else:
        raise GrawlixPluginError("object is not a GrawlixPlugin", plugin=plugin_info)

    if plugin is None:
        raise GrawlixPluginError("plugin is undefined", plugin=plugin_info)
    if not isinstance(plugin, GrawlixPlugin):
        raise GrawlixPluginError("object is not a GrawlixPlugin", plugin=plugin_info)
    if not plugin.name:
        raise GrawlixPluginError("invalid plugin; name property is not provided", plugin=plugin_info)
    return plugin, plugin_opts


def load_plugin(settings: GrawlixSettings, plugin_info: Any, options: Mapping[str, Any]) -> GrawlixSettings:
    """Resolve, initialize and merge one plugin into ``settings``."""
    plugin, plugin_opts = resolve_plugin(plugin_info, options)
    try:
        plugin.init(plugin_opts)
    except Exception as err:
        raise GrawlixPluginError("plugin init failed", plugin=plugin, base_error=err) from err
    try:
        load_filters(settings, plugin.filters, options.get("allowed") or [])
    except GrawlixFilterError as err:
        if err.plugin is None:
            err.plugin = plugin
        raise GrawlixPluginError("error loading plugin filters", plugin=plugin, base_error=err) from err
    try:
        load_styles(settings, plugin.styles)
    except GrawlixStyleError as err:
        if err.plugin is None:
            err.plugin = plugin
        raise GrawlixPluginError("error loading plugin styles", plugin=plugin, base_error=err) from err
    settings.loaded_plugins.append(plugin.name)
    logger.info(f"Loaded grawlix plugin {plugin.name!r} "
                f"({len(plugin.filters)} filters, {len(plugin.styles)} styles)")
    return settings


def _plugin_entry(info: Any) -> Tuple[Any, Optional[str]]:
    if isinstance(info, Mapping):
        ref = info.get("plugin")
        name = info.get("name")
    else:
        ref, name = info, None
    if not name:
        if isinstance(ref, GrawlixPlugin):
            name = ref.name
        elif isinstance(ref, str):
            name = ref
    return ref, name


def has_plugin(plugin: Any, options: Mapping[str, Any]) -> bool:
    """Whether ``plugin`` (object, factory or name) is in ``options["plugins"]``.

    Factories are matched by identity only; they aren't called to learn a name.
    """
    entries = options.get("plugins") if isinstance(options, Mapping) else None
    if not entries:
        return False
    for info in entries:
        ref, name = _plugin_entry(info)
        if isinstance(plugin, GrawlixPlugin):
            if ref is plugin or (plugin.name and name == plugin.name):
                return True
        elif isinstance(plugin, str):
            if name == plugin:
                return True
        elif ref is plugin:
            return True
    return False


# ---- filters / styles ----
def load_filters(settings: GrawlixSettings, filters: Iterable[Any], allowed: Iterable[str]) -> GrawlixSettings:
    """Add new filters or reconfigure existing ones (descriptors without a pattern)."""
    allowed = list(allowed or [])
    for obj in filters or []:
        if isinstance(obj, GrawlixFilter):
            word, has_pattern = obj.word, True
        elif isinstance(obj, Mapping):
            word, has_pattern = obj.get("word"), "pattern" in obj
        else:
            raise GrawlixFilterError("filter must be a mapping or GrawlixFilter", filter=obj)
        if not isinstance(word, str) or not word:
            raise GrawlixFilterError("word parameter is required", filter=obj)

        if not has_pattern:
            existing = _find(settings.filters, "word", word)
            if existing is None:
                logger.debug(f"No active filter for {word!r}; options ignored")
                continue
            existing.configure(obj)
        elif word not in allowed:
            new = to_grawlix_filter(obj)
            if new is obj:
                new = obj.clone()
            _put(settings.filters, new, "word")
    return settings


def load_styles(settings: GrawlixSettings, styles: Iterable[Any]) -> GrawlixSettings:
    """Add new styles or reconfigure existing ones by name."""
    for obj in styles or []:
        if isinstance(obj, GrawlixStyle):
            _put(settings.styles, to_grawlix_style(obj).clone(), "name")
            continue
        if not isinstance(obj, Mapping):
            raise GrawlixStyleError("style must be a mapping or GrawlixStyle", style=obj)
        name = obj.get("name")
        if not isinstance(name, str) or not name:
            raise GrawlixStyleError("name parameter is required", style=obj)
        existing = _find(settings.styles, "name", name)
        if existing is not None:
            existing.configure(obj)
        else:
            settings.styles.append(to_grawlix_style(obj))
    return settings


# ---- matching ----
def is_match(text: str, settings: GrawlixSettings) -> bool:
    return any(f.is_match(text) for f in settings.filters)


def replace_matches(text: str, settings: GrawlixSettings) -> str:
    """Censor ``text``: each filter in priority order, one occurrence at a time."""
    if settings.style is None:
        raise GrawlixConfigError("settings have no main style; were they parsed as a probe?")
    for f in settings.filters:
        while f.is_match(text):
            text = replace_match(text, f, settings)
    return text


def replace_match(text: str, filter: GrawlixFilter, settings: GrawlixSettings) -> str:
    """Replace the first match of ``filter`` in ``text``."""
    match = filter.get_match(text)
    if match is None:
        return text
    style = None
    if filter.has_style() and settings.style.is_override_allowed:
        style = _find(settings.styles, "name", filter.style)
    if style is None:
        style = settings.style

    if not settings.is_random and style.has_fixed(filter.word):
        repl = style.get_fixed(filter.word)
    else:
        repl = generate_grawlix(text, filter, style)
    if filter.has_template():
        repl = filter.template(repl, match)
    return text[:match.start()] + repl + text[match.end():]


def generate_grawlix(text: str, filter: GrawlixFilter, style: GrawlixStyle) -> str:
    """Random or fill grawlix sized for the filter's (first) match in ``text``."""
    if filter.is_expandable:
        length = filter.get_match_len(text)
    else:
        length = len(filter.word)
    if not style.can_randomize():
        return style.get_fill_grawlix(length)
    return style.get_random_grawlix(length)
