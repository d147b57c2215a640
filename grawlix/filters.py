"""Filters: one obscenity, the pattern that finds it and how it gets replaced."""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Mapping, Optional

import regex

from .errors import GrawlixFilterError

__all__ = [
    "FilterTemplate",
    "GrawlixFilter",
    "FILTERS",
    "compile_template",
    "filter_sort",
    "is_pattern",
    "to_grawlix_filter",
]

Template = Callable[[str, Any], str]

_PATTERN_TYPES = (type(regex.compile("")), type(re.compile("")))


def is_pattern(obj: Any) -> bool:
    """True for compiled ``regex`` or ``re`` patterns, never for plain strings."""
    return isinstance(obj, _PATTERN_TYPES)


class FilterTemplate:
    """Standard templates for filters whose pattern captures innocent text.

    ``{word}`` stands for the generated grawlix and ``\\1``/``\\2`` for the
    pattern's capture groups, which are put back untouched.
    """

    PRE = r"\1{word}"  # group comes before the word
    POST = r"{word}\1"  # group comes after the word
    BETWEEN = r"\1{word}\2"  # word sits between two groups


_TEMPLATE_PART = regex.compile(r"(\{word\}|\\[1-9])")


def compile_template(template: str) -> Template:
    """Compile a template string into ``render(grawlix, match) -> str``."""
    parts = [p for p in _TEMPLATE_PART.split(template) if p]

    def render(token: str, match: Any) -> str:
        groups = match.groups() if match is not None else ()
        out = []
        for part in parts:
            if part == "{word}":
                out.append(token)
            elif _TEMPLATE_PART.fullmatch(part):
                n = int(part[1])
                out.append((groups[n - 1] if n <= len(groups) else None) or "")
            else:
                out.append(part)
        return "".join(out)

    render.template = template  # type: ignore[attr-defined]
    return render


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


class GrawlixFilter:
    def __init__(self, word: str, pattern: Any, **options: Any):
        self.word = word
        self.pattern = pattern
        self.priority = 0
        self.template: Optional[Template] = None
        self.is_expandable = False
        self.style: Optional[str] = None
        self.configure(options)

    def __repr__(self) -> str:
        return f"<GrawlixFilter word={self.word!r} priority={self.priority}>"

    def is_valid(self) -> bool:
        return isinstance(self.word, str) and bool(self.word) and is_pattern(self.pattern)

    def is_match(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def get_match(self, text: str):
        return self.pattern.search(text)

    def get_match_len(self, text: str) -> int:
        """Length of the first match, net of the text its groups captured."""
        match = self.get_match(text)
        if match is None:
            return 0
        return len(match.group(0)) - sum(len(g) for g in match.groups() if g)

    def has_template(self) -> bool:
        return callable(self.template)

    def has_style(self) -> bool:
        return self.style is not None

    def configure(self, options: Optional[Mapping[str, Any]]) -> None:
        if not options:
            return
        if _is_number(options.get("priority")):
            self.priority = options["priority"]
        elif _is_number(options.get("min_priority")) and self.priority < options["min_priority"]:
            self.priority = options["min_priority"]
        template = options.get("template")
        if isinstance(template, str):
            self.template = compile_template(template)
        elif callable(template):
            self.template = template
        if isinstance(options.get("expandable"), bool):
            self.is_expandable = options["expandable"]
        if isinstance(options.get("style"), str):
            self.style = options["style"]

    def clone(self) -> "GrawlixFilter":
        f = GrawlixFilter(self.word, self.pattern)
        f.priority = self.priority
        f.template = self.template
        f.is_expandable = self.is_expandable
        f.style = self.style
        return f


def to_grawlix_filter(obj: Any) -> GrawlixFilter:
    """Build a :class:`GrawlixFilter` from a descriptor dict."""
    if isinstance(obj, GrawlixFilter):
        if not obj.is_valid():
            raise GrawlixFilterError("invalid GrawlixFilter", filter=obj)
        return obj
    if not isinstance(obj, Mapping):
        raise GrawlixFilterError("filter must be a mapping or GrawlixFilter", filter=obj)
    word = obj.get("word")
    if not isinstance(word, str) or not word:
        raise GrawlixFilterError("word parameter is required", filter=obj)
    if not is_pattern(obj.get("pattern")):
        raise GrawlixFilterError("pattern parameter is required", filter=obj)
    options: Dict[str, Any] = {k: v for k, v in obj.items() if k not in ("word", "pattern")}
    return GrawlixFilter(word, obj["pattern"], **options)


def filter_sort(f: GrawlixFilter):
    """Sort key: lower priority runs first, ties keep catalog order."""
    return f.priority


# separators tolerated between letters ("f u c k", "f.u.c.k", ...)
_SEP = r"""[\s\d_\^\+\=\*\.\-,:"'>|/\\]{0,42}"""
_SEP_NO_DIGITS = r"""[\s_\^\+\=\*\.\-,:"'>|/\\]{0,42}"""
_SEP_NO_ONE = r"""[\s023456789_\^\+\=\*\.\-,:"'>|/\\]{0,42}"""


def _rx(*parts: str):
    return regex.compile("".join(parts), regex.IGNORECASE)


# Order matters: within one priority the first entry wins, so specific words
# (dumbass) must stay ahead of the general ones (ass).
_CATALOG: List[GrawlixFilter] = [
    # fuck
    GrawlixFilter("motherfucker", _rx(r"m[o0u]th(?:er|a)f+u+c+k+([e3]+r+)"),
                  expandable=True, template=FilterTemplate.POST),
    GrawlixFilter("motherfuck", _rx(r"m[o0u]th(?:er|a)f+u+c+k+"), priority=1, expandable=True),
    GrawlixFilter("fuck", _rx(r"f+", _SEP, r"u+", _SEP, r"c+", _SEP, r"k+"),
                  priority=2, expandable=True),
    # shit
    GrawlixFilter("shit", _rx(r"[s$]+", _SEP, r"h+", _SEP, r"[i1]+", _SEP_NO_ONE, r"t+(?!ake)"),
                  expandable=True),
    # cocksucker
    GrawlixFilter("cocksucker", _rx(r"c+[o0]+c+k+s+u+c+k+([e3]+r+)"),
                  expandable=True, template=FilterTemplate.POST),
    GrawlixFilter("cocksuck", _rx(r"c+[o0]+c+k+s+u+c+k+"), priority=1, expandable=True),
    # ass
    GrawlixFilter("assholes", _rx(r"[a@][s$][s$]h[o0]l[e3][s$]")),
    GrawlixFilter("asshole", _rx(r"[a@][s$][s$]h[o0]+l[e3]"), priority=1, expandable=True),
    GrawlixFilter("asses", _rx(r"(\b|^|[^glmp])[a@][s$][s$][e3][s$](?:\b|$)"),
                  template=FilterTemplate.PRE),
    GrawlixFilter("dumbass", _rx(r"\b(dumb)a[s$][s$]+"),
                  priority=1, expandable=True, template=FilterTemplate.PRE),
    GrawlixFilter("ass", _rx(r"(\b|^|\s|[^bcglmprstvu])[a@]", _SEP, r"[s$]", _SEP, r"[s$]+(?:\b|$)"),
                  priority=2, expandable=True, template=FilterTemplate.PRE),
    # tit
    GrawlixFilter("titties", _rx(r"\bt[i1]tt[i1]e[s$]")),
    GrawlixFilter("tittie", _rx(r"\bt[i1]tt[i1]e"), priority=1),
    GrawlixFilter("titty", _rx(r"\bt[i1]tty")),
    GrawlixFilter("tits", _rx(r"\bt+", _SEP_NO_DIGITS, r"[i1]+", _SEP_NO_DIGITS, r"t+",
                              _SEP_NO_DIGITS, r"[s$]+"),
                  priority=1, expandable=True),
    GrawlixFilter("tit", _rx(r"\bt+[i1]+t([^ahilmrtu])"),
                  priority=2, expandable=True, template=FilterTemplate.POST),
    # piss
    GrawlixFilter("piss", _rx(r"p[i1]+ss+(?!ant)"), expandable=True),
    # insults
    GrawlixFilter("dick", _rx(r"d[i1]+c+k+(?!e|i)"), expandable=True),
    GrawlixFilter("cunt", _rx(r"(\b|[^s])c+", _SEP_NO_DIGITS, r"u+", _SEP_NO_DIGITS, r"n+",
                              _SEP_NO_DIGITS, r"t"),
                  expandable=True, template=FilterTemplate.PRE),
    GrawlixFilter("bastard", _rx(r"\bb[a@]+st[a@]+r+d(?!ise|ize)"), expandable=True),
    GrawlixFilter("bitch", _rx(r"b+", _SEP_NO_DIGITS, r"[i1]+", _SEP_NO_DIGITS, r"t",
                               _SEP_NO_DIGITS, r"c", _SEP_NO_DIGITS, r"h"),
                  expandable=True),
]

FILTERS: List[GrawlixFilter] = sorted(_CATALOG, key=filter_sort)
